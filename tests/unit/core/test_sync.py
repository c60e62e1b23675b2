"""Unit tests for core/sync.py"""

import logging

import pytest

from mdsite.core.sync import sync_vault


@pytest.fixture(name="vault")
def vault_fixture(tmp_path):
    vault = tmp_path / "vault"
    vault.mkdir()
    (vault / "My First Post.md").write_text("Intro\n\n![[Pasted Image.png]]\n![[chart.png|400]]\n")
    (vault / "second.md").write_text("No images. ![[missing.png]]\n")
    (vault / ".hidden.md").write_text("secret")
    (vault / "drafts").mkdir()
    (vault / "drafts" / "nested.md").write_text("nested")
    (vault / "Pasted Image.png").write_bytes(b"img")
    (vault / "chart.png").write_bytes(b"chart")
    return vault


def test_sync_vault_copies_slugified_notes(tmp_path, vault):
    """Top-level, non-hidden notes are copied under slugified names."""
    notes = tmp_path / "notes"
    note_count, _ = sync_vault(vault, notes)
    assert note_count == 2
    assert sorted(p.name for p in notes.glob("*.md")) == ["my-first-post.md", "second.md"]
    assert (notes / "second.md").read_text() == "No images. ![[missing.png]]\n"


def test_sync_vault_copies_referenced_assets(tmp_path, vault, caplog):
    """Embedded images are copied to attachments/ under slugified names; missing ones are warned about."""
    notes = tmp_path / "notes"
    with caplog.at_level(logging.WARNING, logger="mdsite.core.sync"):
        _, asset_count = sync_vault(vault, notes)
    assert asset_count == 2
    assert (notes / "attachments" / "pasted-image.png").read_bytes() == b"img"
    assert (notes / "attachments" / "chart.png").read_bytes() == b"chart"
    assert "Asset not found: missing.png" in caplog.text


def test_sync_vault_replaces_existing_notes(tmp_path, vault):
    """Stale notes from a previous sync are removed."""
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "stale.md").write_text("old")
    sync_vault(vault, notes)
    assert not (notes / "stale.md").exists()


def test_sync_vault_separate_assets_dir(tmp_path, vault):
    """Attachments are looked up in assets_dir when given."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "chart.png").write_bytes(b"other chart")
    notes = tmp_path / "notes"
    _, asset_count = sync_vault(vault, notes, assets)
    assert asset_count == 1
    assert (notes / "attachments" / "chart.png").read_bytes() == b"other chart"


def test_sync_vault_missing_vault(tmp_path):
    """A missing vault directory raises and leaves the notes directory alone."""
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "keep.md").write_text("keep")
    with pytest.raises(FileNotFoundError, match="Vault folder not found"):
        sync_vault(tmp_path / "nope", notes)
    assert (notes / "keep.md").exists()


@pytest.mark.parametrize("vault_rel", ["notes", "notes/vault"])
def test_sync_vault_refuses_vault_inside_notes_dir(tmp_path, vault_rel):
    """A vault at or under the notes directory is rejected before anything is deleted."""
    notes = tmp_path / "notes"
    vault = tmp_path / vault_rel
    vault.mkdir(parents=True, exist_ok=True)
    (vault / "keep.md").write_text("keep")
    with pytest.raises(ValueError, match="Refusing to delete"):
        sync_vault(vault, notes)
    assert (vault / "keep.md").read_text() == "keep"


def test_sync_vault_refuses_assets_inside_notes_dir(tmp_path, vault):
    """An assets directory under the notes directory is rejected too."""
    notes = tmp_path / "notes"
    assets = notes / "attachments"
    assets.mkdir(parents=True)
    (assets / "chart.png").write_bytes(b"chart")
    with pytest.raises(ValueError, match="Refusing to delete"):
        sync_vault(vault, notes, assets)
    assert (assets / "chart.png").exists()
