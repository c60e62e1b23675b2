"""Global data loading and layered render-context construction"""

import json
from pathlib import Path
from typing import Any, Mapping

import yaml


DATA_EXTENSIONS = {'.json', '.yaml', '.yml'}


def _decode(path: Path) -> Any:
    text = path.read_text(encoding='utf-8')
    try:
        if path.suffix == '.json':
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid data file {path}: {e}") from e


def load_global_data(data_dir: Path) -> dict[str, Any]:
    """Return {file stem: decoded value} for each data file directly in data_dir.

    A missing directory contributes nothing.
    """
    if not data_dir.is_dir():
        return {}
    return {
        p.stem: _decode(p)
        for p in sorted(data_dir.iterdir())
        if p.is_file() and p.suffix in DATA_EXTENSIONS
    }


def build_context(
    builtins: Mapping[str, Any],
    global_data: Mapping[str, Any],
    frontmatter: Mapping[str, Any],
    ) -> dict[str, Any]:
    """Merge built-ins < global data < frontmatter; later layers win on key collision."""
    context: dict[str, Any] = {}
    for layer in (builtins, global_data, frontmatter):
        context.update(layer)
    return context
