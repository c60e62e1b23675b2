"""Site build orchestration: clean -> pages -> notes -> listing -> static assets"""

import logging
import threading
import time
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from mdsite.config import Settings
from mdsite.core.data import load_global_data
from mdsite.core.markdown import MarkdownRenderer, make_markdown_renderer
from mdsite.core.models import BuildResult, Document, NoteMeta, OutputArtifact
from mdsite.core.notes import ATTACHMENTS_DIR, discover_notes, render_listing, render_note
from mdsite.core.pages import discover_pages, render_page
from mdsite.core.paths import NOTES_PREFIX
from mdsite.core.templates import load_templates
from mdsite.core.utils.fs import clean_dir, copy_tree, ensure_disjoint, write_text


logger = logging.getLogger(__name__)

# Serialises builds so two runs never write the output root at once.
_BUILD_LOCK = threading.Lock()


def _render(path: Path, root: Path, fn: Callable[[Document], object]):
    """Read and render one source file, tagging any failure with its path."""
    try:
        return fn(Document.read(path, root))
    except Exception as e:
        raise RuntimeError(f"Failed to render {path}: {e}") from e


def _write(output_dir: Path, artifact: OutputArtifact) -> None:
    try:
        write_text(output_dir, artifact.path, artifact.content)
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to write {artifact.path} (from {artifact.source}): {e}") from e


def copy_static(settings: Settings) -> list[str]:
    """Copy public/, styles/, and note attachments into the output tree. Returns copied sources."""
    output_dir = Path(settings.output_dir)
    copies = [
        (Path(settings.public_dir), output_dir),
        (Path(settings.styles_dir), output_dir / "styles"),
        (Path(settings.notes_dir) / ATTACHMENTS_DIR, output_dir / NOTES_PREFIX / ATTACHMENTS_DIR),
    ]
    copied = []
    for src, dest in copies:
        try:
            if copy_tree(src, dest):
                copied.append(str(src))
        except OSError as e:
            raise RuntimeError(f"Failed to copy {src} -> {dest}: {e}") from e
    return copied


def build_site(
    settings: Settings,
    year: Optional[int] = None,
    render_markdown: Optional[MarkdownRenderer] = None,
    ) -> BuildResult:
    """Rebuild the whole output tree from sources. Any per-file failure aborts the build.

    year is fixed for the duration of the run (defaults to the current year);
    render_markdown defaults to markdown-it with the configured preset.
    """
    with _BUILD_LOCK:
        logger.info("Building site into %s", settings.output_dir)
        start = time.perf_counter()

        output_dir = Path(settings.output_dir)
        pages_dir = Path(settings.pages_dir)
        notes_dir = Path(settings.notes_dir)
        templates_dir = Path(settings.templates_dir)
        sources = [pages_dir, notes_dir, templates_dir, Path(settings.data_dir),
                   Path(settings.public_dir), Path(settings.styles_dir)]
        try:
            ensure_disjoint(output_dir, sources)
            clean_dir(output_dir)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to prepare {output_dir}: {e}") from e

        templates = load_templates(templates_dir, marked_only=templates_dir.resolve() == pages_dir.resolve())
        global_data = load_global_data(Path(settings.data_dir))
        render_markdown = render_markdown or make_markdown_renderer(settings.markdown_preset)
        year = year or date.today().year

        artifacts: list[OutputArtifact] = []

        for path in discover_pages(pages_dir):
            artifact = _render(path, pages_dir, lambda doc: render_page(
                doc, templates, global_data, render_markdown, year,
            ))
            _write(output_dir, artifact)
            artifacts.append(artifact)
        pages = len(artifacts)

        notes_meta: list[NoteMeta] = []
        for path in discover_notes(notes_dir):
            rendered = _render(path, notes_dir, lambda doc: render_note(
                doc, templates, global_data, render_markdown, year, settings.published_only,
            ))
            if rendered is None:
                continue
            artifact, meta = rendered
            _write(output_dir, artifact)
            artifacts.append(artifact)
            notes_meta.append(meta)

        listing = None
        if notes_dir.is_dir():
            listing = render_listing(
                notes_meta, templates, global_data, year, settings.listing_template, notes_dir,
            )
            if listing is not None:
                _write(output_dir, listing)
                artifacts.append(listing)

        copy_static(settings)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Built %d page(s), %d note(s) in %.0fms", pages, len(notes_meta), elapsed_ms)
        return BuildResult(
            artifacts=artifacts,
            pages=pages,
            notes=len(notes_meta),
            listing=listing is not None,
            elapsed_ms=elapsed_ms,
        )
