"""Detail view text for the selected item.

The item's ``detail()`` string is shown verbatim. When color is enabled and
the text is a JSON document, it is colorized with Pygments first.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_all_styles

from ..items import MonitoredItem

DEFAULT_STYLE = "monokai"


def selected_item(items: Sequence[MonitoredItem], index: int) -> MonitoredItem | None:
    """Return ``items[index]`` when the index is in bounds, else ``None``."""
    if 0 <= index < len(items):
        return items[index]
    return None


def _looks_like_json(text: str) -> bool:
    stripped = text.strip()
    if not stripped or stripped[0] not in "[{":
        return False
    try:
        json.loads(stripped)
    except ValueError:
        return False
    return True


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    return style if style in set(get_all_styles()) else DEFAULT_STYLE


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def colorize_detail(text: str, style: str = DEFAULT_STYLE) -> str:
    """Colorize JSON detail text; anything else is returned unchanged."""
    if not _looks_like_json(text):
        return text
    rendered = highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
    # Pygments always terminates output with a newline; keep the item's own ending.
    if not text.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


def render_detail(item: MonitoredItem | None, *, color: bool, style: str = DEFAULT_STYLE) -> str:
    """Return the detail panel text for ``item`` (empty when nothing is selected)."""
    if item is None:
        return ""
    text = item.detail()
    if color:
        return colorize_detail(text, style)
    return text
