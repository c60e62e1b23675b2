"""markdown-it renderer factory"""

from typing import Callable

from markdown_it import MarkdownIt


MarkdownRenderer = Callable[[str], str]

TYPOGRAPHY_RULES = ['linkify', 'replacements', 'smartquotes']


def make_markdown_renderer(preset: str = 'default') -> MarkdownRenderer:
    """Return a markdown -> HTML callable with raw HTML, autolinks, and smart punctuation."""
    md = MarkdownIt(preset, options_update={"html": True, "linkify": True, "typographer": True})
    md.enable(TYPOGRAPHY_RULES, ignoreInvalid=True)
    return md.render
