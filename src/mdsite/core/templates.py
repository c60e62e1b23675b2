"""Template store and flat {{ }} / {{{ }}} placeholder substitution"""

import html
import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Sequence


logger = logging.getLogger(__name__)

RAW_RE = re.compile(r'\{\{\{\s*(\w+)\s*\}\}\}')
ESCAPED_RE = re.compile(r'\{\{\s*(\w+)\s*\}\}')
TEMPLATE_MARKER = '_'


def load_templates(templates_dir: Path, marked_only: bool = False) -> Mapping[str, str]:
    """Load *.html files in templates_dir keyed by stem, minus a leading '_'.

    With marked_only, files without the '_' marker are skipped (used when
    templates live beside the pages they lay out).
    """
    templates: dict[str, str] = {}
    if not templates_dir.is_dir():
        return MappingProxyType(templates)
    for p in sorted(templates_dir.glob('*.html')):
        if not p.is_file():
            continue
        marked = p.name.startswith(TEMPLATE_MARKER)
        if marked_only and not marked:
            continue
        name = p.stem[len(TEMPLATE_MARKER):] if marked else p.stem
        templates[name] = p.read_text(encoding='utf-8')
    logger.debug("Loaded %d template(s) from %s", len(templates), templates_dir)
    return MappingProxyType(templates)


def stringify(value: Any) -> str:
    """Render a context value as placeholder text; None becomes empty."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'), default=str)
    return str(value)


def render(template: str, context: Mapping[str, Any]) -> str:
    """Substitute {{{raw}}} then {{escaped}} placeholders; unknown names become ''."""
    result = RAW_RE.sub(lambda m: stringify(context.get(m.group(1))), template)
    return ESCAPED_RE.sub(
        lambda m: html.escape(stringify(context.get(m.group(1))), quote=False),
        result,
    )


def apply_layout(
    templates: Mapping[str, str],
    names: Sequence[str],
    context: Mapping[str, Any],
    content: str,
    ) -> str:
    """Render the first layout in names that exists; with none, return content as-is."""
    for name in names:
        if name in templates:
            return render(templates[name], context)
    logger.debug("No layout among %s; emitting content without layout", list(names))
    return content
