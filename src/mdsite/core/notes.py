"""Notes pipeline: per-note rendering, embed rewriting, and the notes listing page"""

import html
import logging
import re
from datetime import date
from pathlib import Path, PurePosixPath
from typing import Any, Mapping, Optional

from mdsite.core.data import build_context
from mdsite.core.frontmatter import parse_frontmatter
from mdsite.core.markdown import MarkdownRenderer
from mdsite.core.models import Document, NoteMeta, OutputArtifact
from mdsite.core.paths import INDEX_FILE, NOTES_PREFIX, note_output_path
from mdsite.core.templates import apply_layout, render
from mdsite.core.utils.fs import iter_files
from mdsite.core.utils.slug import slugify


logger = logging.getLogger(__name__)

EMBED_RE = re.compile(r'!\[\[([^\]]+)\]\]')
ATTACHMENTS_DIR = 'attachments'
NOTE_LAYOUTS = ('note', 'default')
PUBLISHED_MARKER = 'true'
LISTING_PATH = PurePosixPath(NOTES_PREFIX) / INDEX_FILE
LISTING_ITEM = (
    '<li><a href="./{slug}/">'
    '<span class="note-list-date">{date}</span>'
    '<h2 class="note-list-title">{title}</h2>'
    '</a></li>'
)


def discover_notes(notes_dir: Path) -> list[Path]:
    return iter_files(notes_dir, {'.md'}, recursive=False)


def embed_target(ref: str) -> str:
    """Return the attachment filename for an embed reference, dropping any '|size' suffix."""
    return slugify(ref.split('|', 1)[0].strip())


def rewrite_embeds(body: str) -> str:
    """Turn ![[Some Image.png]] into ![](../attachments/some-image.png)."""
    return EMBED_RE.sub(
        lambda m: f"![](../{ATTACHMENTS_DIR}/{embed_target(m.group(1))})",
        body,
    )


def format_date(value: str) -> str:
    """Format an ISO date as 'January 5, 2024'; other values pass through unchanged."""
    if not value:
        return ''
    try:
        d = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{d:%B} {d.day}, {d.year}"


def is_published(data: Mapping[str, str], published_only: bool = False) -> bool:
    """A present 'published' flag must equal 'true'; published_only also rejects a missing flag."""
    if 'published' in data:
        return data['published'] == PUBLISHED_MARKER
    return not published_only


def render_note(
    doc: Document,
    templates: Mapping[str, str],
    global_data: Mapping[str, Any],
    render_markdown: MarkdownRenderer,
    year: int,
    published_only: bool = False,
    ) -> Optional[tuple[OutputArtifact, NoteMeta]]:
    """Render one note to notes/<slug>/index.html; None if the publish filter excludes it."""
    data, body = parse_frontmatter(doc.raw)
    if not is_published(data, published_only):
        logger.info("Skipping unpublished note %s", doc.path)
        return None

    content = render_markdown(rewrite_embeds(body))
    slug = data.get('slug') or slugify(doc.rel_path.stem)
    note_date = data.get('date', '')

    context = build_context(
        {
            "content": content,
            "title": slug,
            "slug": slug,
            "description": "",
            "date": "",
            "display_date": format_date(note_date),
            "year": year,
        },
        global_data,
        data,
    )
    meta = NoteMeta(title=data.get('title') or slug, slug=slug, date=note_date)
    artifact = OutputArtifact(
        path=note_output_path(slug),
        content=apply_layout(templates, NOTE_LAYOUTS, context, content),
        source=doc.path,
    )
    return artifact, meta


def sort_notes(notes: list[NoteMeta]) -> list[NoteMeta]:
    """Newest first by ISO date string; ties keep discovery order."""
    return sorted(notes, key=lambda n: n.date, reverse=True)


def listing_items(notes: list[NoteMeta]) -> str:
    return '\n'.join(
        LISTING_ITEM.format(
            slug=html.escape(n.slug),
            date=html.escape(format_date(n.date), quote=False),
            title=html.escape(n.title, quote=False),
        )
        for n in sort_notes(notes)
    )


def render_listing(
    notes: list[NoteMeta],
    templates: Mapping[str, str],
    global_data: Mapping[str, Any],
    year: int,
    template_name: str = 'notes-listing',
    source: Optional[Path] = None,
    ) -> Optional[OutputArtifact]:
    """Render notes/index.html from collected NoteMeta; None when the listing template is absent."""
    template = templates.get(template_name)
    if template is None:
        logger.info("No '%s' template; skipping notes listing", template_name)
        return None
    context = build_context({"content": listing_items(notes), "year": year}, global_data, {})
    return OutputArtifact(
        path=LISTING_PATH,
        content=render(template, context),
        source=source or Path(NOTES_PREFIX),
    )
