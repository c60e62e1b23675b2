"""Frontmatter extraction: flat key/value header between '---' marker lines"""

import re


FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    """Strip one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:
        return value[1:-1]
    return value


def _parse_block(block: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for line in block.splitlines():
        key, sep, value = line.partition(':')
        key = key.strip()
        if not sep or not key:
            continue
        data[key] = _unquote(value.strip())
    return data


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Return (frontmatter, body). Text without a complete leading block is all body.

    Values are kept as strings; nothing here raises on malformed input.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    return _parse_block(m.group(1)), text[m.end():]
