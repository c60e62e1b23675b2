"""Copy markdown notes and the attachments they embed from a vault into the notes directory"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from mdsite.core.notes import ATTACHMENTS_DIR, EMBED_RE, embed_target
from mdsite.core.utils.fs import clean_dir, ensure_disjoint
from mdsite.core.utils.slug import slugify


logger = logging.getLogger(__name__)


def _vault_notes(vault_dir: Path) -> list[Path]:
    """Top-level .md files in the vault, ignoring hidden files."""
    return sorted(
        p for p in vault_dir.iterdir()
        if p.is_file() and p.suffix == '.md' and not p.name.startswith('.')
    )


def sync_vault(
    vault_dir: Path,
    notes_dir: Path,
    assets_dir: Optional[Path] = None,
    ) -> tuple[int, int]:
    """Replace notes_dir with the vault's notes plus their referenced attachments.

    Note filenames and attachment names are slugified so they line up with
    the links the notes pipeline writes. Returns (notes copied, assets copied).
    """
    if not vault_dir.is_dir():
        raise FileNotFoundError(f"Vault folder not found: {vault_dir}")
    assets_dir = assets_dir or vault_dir
    attachments = notes_dir / ATTACHMENTS_DIR

    ensure_disjoint(notes_dir, [vault_dir, assets_dir])
    clean_dir(notes_dir)
    attachments.mkdir(parents=True, exist_ok=True)

    refs: dict[str, str] = {}
    notes = 0
    for src in _vault_notes(vault_dir):
        text = src.read_text(encoding='utf-8')
        (notes_dir / slugify(src.name)).write_text(text, encoding='utf-8')
        notes += 1
        for m in EMBED_RE.finditer(text):
            name = m.group(1).split('|', 1)[0].strip()
            refs.setdefault(name, embed_target(name))

    assets = 0
    for ref, target in refs.items():
        src = assets_dir / ref
        if not src.is_file():
            logger.warning("Asset not found: %s", ref)
            continue
        shutil.copyfile(src, attachments / target)
        assets += 1

    logger.info("Copied %d notes, %d assets", notes, assets)
    return notes, assets
