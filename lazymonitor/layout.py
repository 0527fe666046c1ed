"""Panel geometry for the monitor screen.

Rectangles use inclusive border coordinates ``(x0, y0, x1, y1)``: the frame is
drawn on the border cells and content lives strictly inside. Layout is a pure
function of the terminal size and the two configurable widths.

::

    +-query----------------+ +-error--------+
    +----------------------+ |              |
    +-filter---------------+ |              |
    +----------------------+ +--------------+
    +-list-+ +-detail----------------------+
    |      | |                             |
    +------+ +-----------------------------+
"""

from __future__ import annotations

from dataclasses import dataclass

PANEL_QUERY = "query"
PANEL_FILTER = "filter"
PANEL_ERROR = "error"
PANEL_LIST = "list"
PANEL_DETAIL = "detail"

PANEL_NAMES: tuple[str, ...] = (PANEL_QUERY, PANEL_FILTER, PANEL_ERROR, PANEL_LIST, PANEL_DETAIL)

HEIGHT_QUERY = 1
HEIGHT_FILTER = 1
DEFAULT_LIST_WIDTH = 20
DEFAULT_ERROR_WIDTH = 50
MIN_PANEL_INNER = 1
MIN_COLUMNS = 12
MIN_ROWS = 9


@dataclass(frozen=True)
class Rect:
    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def inner_width(self) -> int:
        return max(0, self.x1 - self.x0 - 1)

    @property
    def inner_height(self) -> int:
        return max(0, self.y1 - self.y0 - 1)


def clamp_side_width(columns: int, requested: int, other_min: int) -> int:
    """Clamp a side panel width so the neighbouring panel keeps some content."""
    # Each panel needs two border columns plus at least one content column.
    upper = max(MIN_PANEL_INNER + 1, columns - other_min - 3)
    return max(MIN_PANEL_INNER + 1, min(requested, upper))


def compute_layout(
    columns: int,
    rows: int,
    list_width: int = DEFAULT_LIST_WIDTH,
    error_width: int = DEFAULT_ERROR_WIDTH,
) -> dict[str, Rect]:
    """Return the rectangle of every panel for a ``columns`` x ``rows`` terminal."""
    columns = max(MIN_COLUMNS, columns)
    rows = max(MIN_ROWS, rows)
    error_width = clamp_side_width(columns, error_width, MIN_PANEL_INNER + 2)
    list_width = clamp_side_width(columns, list_width, MIN_PANEL_INNER + 2)

    top_right = columns - error_width - 2
    filter_top = HEIGHT_QUERY + 2
    filter_bottom = filter_top + HEIGHT_FILTER + 1
    body_top = filter_bottom + 1
    return {
        PANEL_QUERY: Rect(0, 0, top_right, HEIGHT_QUERY + 1),
        PANEL_FILTER: Rect(0, filter_top, top_right, filter_bottom),
        PANEL_ERROR: Rect(top_right + 1, 0, columns - 1, filter_bottom),
        PANEL_LIST: Rect(0, body_top, list_width, rows - 1),
        PANEL_DETAIL: Rect(list_width + 1, body_top, columns - 1, rows - 1),
    }
