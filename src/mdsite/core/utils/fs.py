"""Source discovery and output-tree file operations"""

import shutil
from pathlib import Path, PurePosixPath
from typing import Iterable


def iter_files(root: Path, suffixes: Iterable[str], recursive: bool = True) -> list[Path]:
    """Return sorted files under root whose suffix is in suffixes; [] if root is missing."""
    if not root.is_dir():
        return []
    suffixes = set(suffixes)
    candidates = root.rglob('*') if recursive else root.iterdir()
    return sorted(p for p in candidates if p.is_file() and p.suffix in suffixes)


def clean_dir(path: Path) -> None:
    """Delete path (if present) and recreate it empty.

    Refuses to remove the working directory or one of its ancestors.
    """
    if path.exists():
        resolved = path.resolve()
        cwd = Path.cwd().resolve()
        if resolved == cwd or resolved in cwd.parents:
            raise ValueError(f"Refusing to delete {path}: it contains the working directory")
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


def ensure_disjoint(target: Path, sources: Iterable[Path]) -> None:
    """Raise if target is, or contains, any of sources; cleaning it would delete them."""
    resolved = target.resolve()
    for src in sources:
        if src.resolve().is_relative_to(resolved):
            raise ValueError(f"Refusing to delete {target}: it contains source directory {src}")


def write_text(root: Path, rel_path: PurePosixPath, text: str) -> Path:
    """Write text to root/rel_path, creating parents; rel_path must stay inside root."""
    dest = root / rel_path
    if not dest.resolve().is_relative_to(root.resolve()):
        raise ValueError(f"Output path {rel_path} escapes {root}")
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(text, encoding='utf-8')
    return dest


def copy_tree(src: Path, dest: Path) -> bool:
    """Merge src into dest, overwriting existing files. Returns False if src is missing."""
    if not src.is_dir():
        return False
    shutil.copytree(src, dest, dirs_exist_ok=True)
    return True
