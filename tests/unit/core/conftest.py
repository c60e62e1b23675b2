"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest

from mdsite.core.models import Document


@pytest.fixture(name="fake_markdown")
def fake_markdown_fixture():
    """Deterministic stand-in renderer: wraps the stripped body in a paragraph."""
    return lambda text: f"<p>{text.strip()}</p>"


@pytest.fixture(name="make_doc")
def make_doc_fixture(tmp_path):
    """Write text under tmp_path/<root>/<rel> and return it as a Document."""
    def _make(rel: str, text: str, root: str = "pages") -> Document:
        base = tmp_path / root
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return Document.read(path, base)
    return _make
