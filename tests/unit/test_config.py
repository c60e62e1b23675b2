"""Unit tests for config.py"""

import pytest

from mdsite.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is picked up."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.output_dir == "dist"
    assert settings.pages_dir == "pages"
    assert settings.templates_dir == "pages"
    assert settings.published_only is False
    assert settings.vault_dir is None


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml override the defaults."""
    (tmp_path / "config.yaml").write_text("output_dir: public_html\nnotes_dir: posts\n")
    settings = load_config()
    assert settings.output_dir == "public_html"
    assert settings.notes_dir == "posts"


def test_load_config_uses_env_output_dir(monkeypatch):
    """MDSITE_OUTPUT_DIR env var is picked up by load_config."""
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "env-dist")
    assert load_config().output_dir == "env-dist"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDSITE_OUTPUT_DIR takes precedence over config.yaml output_dir."""
    (tmp_path / "config.yaml").write_text("output_dir: yaml-dist\n")
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "env-dist")
    assert load_config().output_dir == "env-dist"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDSITE_OUTPUT_DIR", "env-dist")
    settings = load_config(overrides={"output_dir": "cli-dist"})
    assert settings.output_dir == "cli-dist"


def test_load_config_none_override_ignored(monkeypatch):
    """None-valued overrides (unset CLI options) leave lower layers alone."""
    monkeypatch.setenv("MDSITE_NOTES_DIR", "env-notes")
    settings = load_config(overrides={"notes_dir": None})
    assert settings.notes_dir == "env-notes"


def test_load_config_env_published_only_coerced(monkeypatch):
    """MDSITE_PUBLISHED_ONLY env var is coerced to bool."""
    monkeypatch.setenv("MDSITE_PUBLISHED_ONLY", "true")
    assert load_config().published_only is True


def test_load_config_env_vault_dir(monkeypatch):
    """MDSITE_VAULT_DIR configures the sync source."""
    monkeypatch.setenv("MDSITE_VAULT_DIR", "/vault/blog")
    assert load_config().vault_dir == "/vault/blog"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    """load_config rejects a config.yaml that is not a mapping."""
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()
