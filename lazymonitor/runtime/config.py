"""JSON config helpers.

Reads panel widths, theme, detail style and the initial column filter from a
JSON object in the user config directory. The file is only read: malformed or
missing config falls back to defaults, and nothing is written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..layout import DEFAULT_ERROR_WIDTH, DEFAULT_LIST_WIDTH
from ..render.detail import DEFAULT_STYLE
from ..state import DEFAULT_FILTER

logger = logging.getLogger(__name__)

APP_NAME = "lazymonitor"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class MonitorConfig:
    """Effective settings after config-file values have been validated."""

    list_width: int = DEFAULT_LIST_WIDTH
    error_width: int = DEFAULT_ERROR_WIDTH
    theme: str | None = None
    style: str = DEFAULT_STYLE
    default_filter: str = DEFAULT_FILTER


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object, default: int) -> int:
    # bool is an int subclass; JSON true/false are not widths.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _non_empty_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_monitor_config() -> MonitorConfig:
    """Return validated settings, each invalid entry replaced by its default."""
    data = load_config()
    defaults = MonitorConfig()
    default_filter = data.get("default_filter")
    return MonitorConfig(
        list_width=_positive_int(data.get("list_width"), defaults.list_width),
        error_width=_positive_int(data.get("error_width"), defaults.error_width),
        theme=_non_empty_str(data.get("theme")),
        style=_non_empty_str(data.get("style")) or defaults.style,
        default_filter=default_filter if isinstance(default_filter, str) else defaults.default_filter,
    )
