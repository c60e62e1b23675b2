"""Page pipeline: one .md/.html source file -> one rendered OutputArtifact"""

from pathlib import Path
from typing import Any, Mapping

from mdsite.core.data import build_context
from mdsite.core.frontmatter import parse_frontmatter
from mdsite.core.markdown import MarkdownRenderer
from mdsite.core.models import Document, OutputArtifact
from mdsite.core.paths import MARKDOWN_EXTENSION, resolve_output_path
from mdsite.core.templates import TEMPLATE_MARKER, apply_layout
from mdsite.core.utils.fs import iter_files


PAGE_EXTENSIONS = {'.md', '.html'}
DEFAULT_LAYOUT = 'default'


def discover_pages(pages_dir: Path) -> list[Path]:
    """Return page sources under pages_dir, skipping '_' prefixed layout files."""
    return [
        p for p in iter_files(pages_dir, PAGE_EXTENSIONS)
        if not p.name.startswith(TEMPLATE_MARKER)
    ]


def render_page(
    doc: Document,
    templates: Mapping[str, str],
    global_data: Mapping[str, Any],
    render_markdown: MarkdownRenderer,
    year: int,
    ) -> OutputArtifact:
    """Parse, render, lay out, and place a single page."""
    data, body = parse_frontmatter(doc.raw)
    is_markdown = doc.rel_path.suffix == MARKDOWN_EXTENSION
    content = render_markdown(body) if is_markdown else body

    context = build_context(
        {"content": content, "title": "", "description": "", "date": "", "year": year},
        global_data,
        data,
    )
    html = apply_layout(templates, [data.get('layout') or DEFAULT_LAYOUT], context, content)
    return OutputArtifact(
        path=resolve_output_path(doc.rel_path, data.get('permalink')),
        content=html,
        source=doc.path,
    )
