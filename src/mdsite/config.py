"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str = "mdsite"
    pages_dir:        str = Field(default="pages",   description="Source pages (.md/.html), scanned recursively")
    notes_dir:        str = Field(default="notes",   description="Source notes (.md), top level only")
    templates_dir:    str = Field(default="pages",   description="Layout templates; '_' prefixed when shared with pages")
    data_dir:         str = Field(default="data",    description="Global data files (.json/.yaml/.yml)")
    output_dir:       str = Field(default="dist",    description="Generated site; deleted and rebuilt on every build")
    public_dir:       str = Field(default="public",  description="Static assets copied into the output root")
    styles_dir:       str = Field(default="styles",  description="Stylesheets copied to <output_dir>/styles")
    markdown_preset:  str = Field(default="default", description="MarkdownIt preset name")
    listing_template: str = Field(default="notes-listing", description="Template used for notes/index.html")
    published_only:   bool = Field(default=False,    description="Only emit notes with 'published: true'")
    vault_dir:        Optional[str] = Field(default=None, description="Vault directory notes are synced from")
    assets_dir:       Optional[str] = Field(default=None, description="Attachment source for sync; defaults to vault_dir")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
