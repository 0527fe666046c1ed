"""Scrollable text panel: the viewport primitive the monitor drives.

A panel owns a text buffer, a rectangle on screen, a scroll origin into the
buffer and a cursor relative to that origin. Positions that cannot be shown
are rejected with ``PanelPositionError`` rather than silently clamped.
"""

from __future__ import annotations

from ..items import MonitorError
from ..layout import Rect
from .line_edit import LineEditor


class PanelPositionError(MonitorError):
    """A cursor or origin position was rejected by a panel."""


class Panel:
    """One boxed region of the screen with its own buffer and viewport."""

    def __init__(
        self,
        name: str,
        title: str,
        rect: Rect,
        *,
        highlight: bool = False,
        editable: bool = False,
        alert: bool = False,
    ) -> None:
        self.name = name
        self.title = title
        self.rect = rect
        self.highlight = highlight
        self.alert = alert
        self.focused = False
        self.editor = LineEditor() if editable else None
        self._buffer: list[str] = []
        self.cursor_x = 0
        self.cursor_y = 0
        self.origin_x = 0
        self.origin_y = 0

    @property
    def editable(self) -> bool:
        return self.editor is not None

    def size(self) -> tuple[int, int]:
        """Return the content size ``(width, height)`` inside the border."""
        return self.rect.inner_width, self.rect.inner_height

    def set_rect(self, rect: Rect) -> None:
        """Move/resize the panel, keeping the absolute cursor row visible."""
        self.rect = rect
        width, height = self.size()
        if height > 0 and self.cursor_y >= height:
            shift = self.cursor_y - height + 1
            self.origin_y += shift
            self.cursor_y -= shift
        if width > 0 and self.cursor_x >= width:
            self.cursor_x = width - 1

    def clear(self) -> None:
        self._buffer = []

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def buffer(self) -> str:
        if self.editor is not None:
            return self.editor.text
        return "".join(self._buffer)

    def lines(self) -> list[str]:
        """Return buffer lines; an empty buffer has no lines at all."""
        text = self.buffer()
        if not text:
            return []
        return text.split("\n")

    @property
    def cursor(self) -> tuple[int, int]:
        return self.cursor_x, self.cursor_y

    @property
    def origin(self) -> tuple[int, int]:
        return self.origin_x, self.origin_y

    def set_cursor(self, x: int, y: int) -> None:
        width, height = self.size()
        if x < 0 or y < 0 or x >= max(1, width) or y >= max(1, height):
            raise PanelPositionError(f"{self.name}: invalid cursor ({x},{y}) for size {width}x{height}")
        self.cursor_x = x
        self.cursor_y = y

    def set_origin(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            raise PanelPositionError(f"{self.name}: invalid origin ({x},{y})")
        self.origin_x = x
        self.origin_y = y

    def selected_row(self) -> int:
        """Return the absolute buffer row under the cursor."""
        return self.origin_y + self.cursor_y

    def move_cursor(self, dy: int) -> bool:
        """Move the cursor ``dy`` rows, scrolling at the viewport edges.

        The cursor never moves past the last buffer line. Returns whether the
        absolute row changed.
        """
        _, height = self.size()
        height = max(1, height)
        current = self.selected_row()
        last = max(0, len(self.lines()) - 1)
        target = max(0, min(last, current + dy))
        if target == current:
            return False
        if target < self.origin_y:
            self.origin_y = target
        elif target >= self.origin_y + height:
            self.origin_y = target - height + 1
        self.cursor_y = target - self.origin_y
        return True
