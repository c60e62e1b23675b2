"""Slug generation for note filenames and attachment references"""

import re


def slugify(text: str) -> str:
    """Lowercase text and collapse each whitespace run into a single hyphen."""
    return re.sub(r'\s+', '-', text).lower()
