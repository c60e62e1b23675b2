"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdsite.config import Settings, load_config
from mdsite.core.pipeline import build_site
from mdsite.core.sync import sync_vault


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_cmd(
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    pages: Annotated[Optional[str], typer.Option("--pages-dir", help="Pages source directory")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes-dir", help="Notes source directory")] = None,
    templates: Annotated[Optional[str], typer.Option("--templates-dir", help="Layout templates directory")] = None,
    data: Annotated[Optional[str], typer.Option("--data-dir", help="Global data directory")] = None,
    preset: Annotated[Optional[str], typer.Option("--preset", help="MarkdownIt preset name")] = None,
    published_only: Annotated[Optional[bool], typer.Option("--published-only", help="Only emit notes with 'published: true'")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Render pages and notes through their layouts into the output directory."""
    _configure_logging(verbose)
    settings = _settings(overrides={
        "output_dir": out, "pages_dir": pages, "notes_dir": notes,
        "templates_dir": templates, "data_dir": data,
        "markdown_preset": preset, "published_only": published_only,
    })
    try:
        result = build_site(settings)
    except Exception as e:
        _fail("Build failed", e)

    for artifact in result.artifacts:
        typer.echo(f"  {artifact.source} -> {Path(settings.output_dir) / artifact.path}")
    typer.echo(
        f"Built {result.pages} page(s), {result.notes} note(s) "
        f"to {settings.output_dir}/ in {result.elapsed_ms:.0f}ms"
    )


def sync_cmd(
    vault: Annotated[Optional[str], typer.Option("--vault-dir", help="Vault directory to copy notes from")] = None,
    assets: Annotated[Optional[str], typer.Option("--assets-dir", help="Attachment directory (defaults to vault)")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes-dir", help="Local notes directory to replace")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    ):
    """Replace the notes directory with markdown notes and embedded images from a vault."""
    _configure_logging(verbose)
    settings = _settings(overrides={"vault_dir": vault, "assets_dir": assets, "notes_dir": notes})
    if not settings.vault_dir:
        _fail("No vault directory configured. Pass --vault-dir or set MDSITE_VAULT_DIR.")

    try:
        note_count, asset_count = sync_vault(
            Path(settings.vault_dir),
            Path(settings.notes_dir),
            Path(settings.assets_dir) if settings.assets_dir else None,
        )
    except (OSError, ValueError) as e:
        _fail("Sync failed", e)
    typer.echo(f"Copied {note_count} notes, {asset_count} assets to {settings.notes_dir}/")
