"""Output path derivation for pages and notes"""

from pathlib import PurePosixPath
from typing import Optional


MARKDOWN_EXTENSION = '.md'
INDEX_FILE = 'index.html'
NOTES_PREFIX = 'notes'


def resolve_output_path(rel_path: PurePosixPath, permalink: Optional[str] = None) -> PurePosixPath:
    """Return the destination of a page relative to the output root.

    permalink 'x/' -> x/index.html; permalink 'x.html' -> x.html;
    about.md -> about/index.html; about.html -> about.html.
    """
    rel_path = PurePosixPath(rel_path)
    if permalink:
        target = permalink.lstrip('/')
        if permalink.endswith('/'):
            return PurePosixPath(target) / INDEX_FILE
        return PurePosixPath(target)
    if rel_path.suffix == MARKDOWN_EXTENSION:
        return rel_path.with_suffix('') / INDEX_FILE
    return rel_path


def note_output_path(slug: str) -> PurePosixPath:
    return PurePosixPath(NOTES_PREFIX) / slug / INDEX_FILE
