"""Table view: one row per item, one column per filtered key.

Rows are tab-separated cells aligned with elastic tab stops. A cell followed
by a tab belongs to a column whose width is the widest such cell plus
padding; the trailing cell of a row is written as-is.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..ansi import display_width
from ..filters import matches_any
from ..items import MonitoredItem
from ..pipeline import effective_key_name

CELL_MIN_WIDTH = 8
CELL_PADDING = 2


def single_line(text: str) -> str:
    """Fold a value onto one row so list and table rows stay paired by index."""
    return text.replace("\n", " ")


def table_rows(
    items: Sequence[MonitoredItem],
    active_key: str,
    matchers: Sequence[re.Pattern[str]],
) -> list[list[str]]:
    """Return the cells of every item, skipping its effective key and unmatched keys."""
    rows: list[list[str]] = []
    for item in items:
        current_key = effective_key_name(item, active_key)
        rows.append(
            [
                single_line(item.value(key))
                for key in item.keys()
                if key != current_key and matches_any(matchers, key)
            ]
        )
    return rows


def column_widths(
    rows: Sequence[Sequence[str]],
    min_width: int = CELL_MIN_WIDTH,
    padding: int = CELL_PADDING,
) -> list[int]:
    """Return padded widths for every column that has a tab-terminated cell."""
    widths: list[int] = []
    for row in rows:
        for idx, cell in enumerate(row[:-1]):
            needed = max(min_width, display_width(cell) + padding)
            if idx == len(widths):
                widths.append(needed)
            elif needed > widths[idx]:
                widths[idx] = needed
    return widths


def align_columns(
    rows: Sequence[Sequence[str]],
    min_width: int = CELL_MIN_WIDTH,
    padding: int = CELL_PADDING,
) -> str:
    """Join ``rows`` into newline-separated lines with aligned columns."""
    widths = column_widths(rows, min_width, padding)
    lines: list[str] = []
    for row in rows:
        parts: list[str] = []
        for idx, cell in enumerate(row):
            if idx == len(row) - 1:
                parts.append(cell)
            else:
                parts.append(cell + " " * (widths[idx] - display_width(cell)))
        lines.append("".join(parts))
    return "\n".join(lines)


def render_table(
    items: Sequence[MonitoredItem],
    active_key: str,
    matchers: Sequence[re.Pattern[str]],
) -> str:
    return align_columns(table_rows(items, active_key, matchers))
