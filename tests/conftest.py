"""Root test configuration: isolate every test from MDSITE_* environment settings"""

import pytest

from mdsite.config import Settings


@pytest.fixture(autouse=True)
def clear_mdsite_env(monkeypatch):
    """Drop MDSITE_<FIELD> variables so the developer's shell cannot leak into tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDSITE_{name.upper()}", raising=False)
