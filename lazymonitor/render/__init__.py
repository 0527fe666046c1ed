"""Frame composition for the boxed panel layout.

Every panel is drawn as a titled box; its buffer is shown through the panel
viewport (origin plus cursor). The whole screen is emitted as one ANSI frame.
Rendering reads panels and never mutates them.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from ..ansi import clip_ansi_line, display_width, fit_ansi_line
from ..panels import LineEditor, Panel
from ..ui_theme import UITheme

BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"
BOX_TOP_LEFT = "┌"
BOX_TOP_RIGHT = "┐"
BOX_BOTTOM_LEFT = "└"
BOX_BOTTOM_RIGHT = "┘"


def selected_with_ansi(text: str, sgr: str, reset: str = "\033[0m") -> str:
    """Apply cursor-row styling without letting embedded resets cancel it."""
    if not sgr:
        return text
    return sgr + text.replace(reset, reset + sgr) + reset


def _styled(text: str, sgr: str, reset: str) -> str:
    return f"{sgr}{text}{reset}" if sgr else text


def _title_bar(panel: Panel, width: int, theme: UITheme) -> str:
    """Return the top border of ``panel`` with its title, ``width`` columns wide."""
    border_sgr = theme.border_focused if panel.focused else theme.border
    title_sgr = theme.title_focused if panel.focused else theme.title
    inner = max(0, width - 2)
    title = clip_ansi_line(f" {panel.title} ", max(0, inner - 1)) if panel.title else ""
    fill = BOX_HORIZONTAL * max(0, inner - 1 - display_width(title))
    if inner == 0:
        middle = ""
    elif title:
        middle = (
            _styled(BOX_HORIZONTAL, border_sgr, theme.reset)
            + _styled(title, title_sgr, theme.reset)
            + _styled(fill, border_sgr, theme.reset)
        )
    else:
        middle = _styled(BOX_HORIZONTAL * inner, border_sgr, theme.reset)
    return (
        _styled(BOX_TOP_LEFT, border_sgr, theme.reset)
        + middle
        + _styled(BOX_TOP_RIGHT, border_sgr, theme.reset)
    )


def _editor_row(panel: Panel, editor: LineEditor, width: int, theme: UITheme) -> str:
    """Render the single editable line, showing the caret when focused."""
    text = editor.text
    caret = editor.caret
    start = max(0, caret - width + 1)
    visible = text[start : start + width]
    if not panel.focused:
        return fit_ansi_line(visible, width)
    local = caret - start
    under = visible[local] if local < len(visible) else " "
    rendered = visible[:local] + _styled(under, theme.editor_caret, theme.reset) + visible[local + 1 :]
    return fit_ansi_line(rendered, width)


def panel_content_rows(panel: Panel, theme: UITheme) -> list[str]:
    """Return the visible content rows of ``panel``, each padded to its inner width."""
    width, height = panel.size()
    if panel.editor is not None:
        rows = [_editor_row(panel, panel.editor, width, theme)]
        rows.extend(" " * width for _ in range(height - 1))
        return rows[:height]

    lines = panel.lines()
    rows = []
    for row in range(height):
        idx = panel.origin_y + row
        text = lines[idx] if 0 <= idx < len(lines) else ""
        cell = fit_ansi_line(text, width)
        if panel.alert and text:
            cell = _styled(cell, theme.error_text, theme.reset)
        if panel.highlight and row == panel.cursor_y:
            cell = selected_with_ansi(cell, theme.cursor_row, theme.reset)
        rows.append(cell)
    return rows


def panel_rows(panel: Panel, theme: UITheme) -> list[str]:
    """Return the full boxed rendering of ``panel``, one string per screen row."""
    rect = panel.rect
    width = rect.x1 - rect.x0 + 1
    border_sgr = theme.border_focused if panel.focused else theme.border
    side = _styled(BOX_VERTICAL, border_sgr, theme.reset)
    rows = [_title_bar(panel, width, theme)]
    for content in panel_content_rows(panel, theme):
        rows.append(side + content + side)
    rows.append(
        _styled(
            BOX_BOTTOM_LEFT + BOX_HORIZONTAL * max(0, width - 2) + BOX_BOTTOM_RIGHT,
            border_sgr,
            theme.reset,
        )
    )
    return rows


def compose_frame(panels: Sequence[Panel], columns: int, rows: int, theme: UITheme) -> list[str]:
    """Place every panel on a ``columns`` x ``rows`` screen and return the screen rows."""
    segments: dict[int, list[tuple[int, str]]] = {row: [] for row in range(rows)}
    for panel in panels:
        for offset, text in enumerate(panel_rows(panel, theme)):
            y = panel.rect.y0 + offset
            if 0 <= y < rows:
                segments[y].append((panel.rect.x0, text))

    screen: list[str] = []
    for y in range(rows):
        out: list[str] = []
        col = 0
        for x0, text in sorted(segments[y], key=lambda segment: segment[0]):
            if x0 < col:
                continue
            out.append(" " * (x0 - col))
            remaining = columns - x0
            if remaining <= 0:
                break
            clipped = clip_ansi_line(text, remaining)
            out.append(clipped)
            col = x0 + display_width(clipped)
        if col < columns:
            out.append(" " * (columns - col))
        screen.append("".join(out))
    return screen


def render_frame(panels: Sequence[Panel], columns: int, rows: int, theme: UITheme) -> str:
    """Return one full-screen ANSI frame for ``panels``."""
    screen = compose_frame(panels, columns, rows, theme)
    return "\033[H\033[J" + "\r\n".join(screen) + theme.reset


def write_frame(frame: str) -> None:
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))
