"""Runtime composition layer for lazymonitor.

``MonitorApp`` owns the single ``AppState``, the five panels and the source.
Key handlers from the binding table call its methods; the loop asks it for
layout and frames. ``run_monitor`` wires it to a real terminal.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import textwrap
from dataclasses import replace

from ..filters import compile_filters
from ..input import MonitorKeyActions, build_binding_table, handle_key
from ..items import Source
from ..layout import (
    PANEL_DETAIL,
    PANEL_ERROR,
    PANEL_FILTER,
    PANEL_LIST,
    PANEL_NAMES,
    PANEL_QUERY,
    compute_layout,
)
from ..paging import ViewportError, compute_page_shift
from ..panels import Panel, PanelPositionError
from ..pipeline import effective_key_value, execute_query, select_key
from ..render import render_frame
from ..render.detail import render_detail, selected_item
from ..render.table import render_table, single_line
from ..state import FOCUS_QUERY, MODE_DETAIL, MODE_TABLE, AppState
from ..ui_theme import UITheme, resolve_theme
from .config import MonitorConfig, load_monitor_config
from .loop import run_main_loop
from .terminal import TerminalController, TerminalInitError

logger = logging.getLogger(__name__)

TITLE_DETAIL = "Detail"
TITLE_TABLE = "Table"


class MonitorApp:
    """Monitor engine: panels, focus, query pipeline and renderers."""

    def __init__(
        self,
        source: Source,
        first_query: str,
        *,
        config: MonitorConfig | None = None,
        theme: UITheme | None = None,
        color: bool = True,
        active_key: str = "",
        columns: int = 80,
        rows: int = 24,
    ) -> None:
        self.source = source
        self.config = config if config is not None else MonitorConfig()
        self.theme = theme if theme is not None else resolve_theme(self.config.theme, no_color=not color)
        self.color = color
        self.state = AppState(
            query=first_query,
            filter_text=self.config.default_filter,
            active_key=active_key,
            columns=columns,
            rows=rows,
        )

        rects = self._layout_rects()
        self.panels: dict[str, Panel] = {
            PANEL_QUERY: Panel(PANEL_QUERY, "Query", rects[PANEL_QUERY], highlight=True, editable=True),
            PANEL_FILTER: Panel(PANEL_FILTER, "Filter", rects[PANEL_FILTER], highlight=True, editable=True),
            PANEL_ERROR: Panel(PANEL_ERROR, "Error", rects[PANEL_ERROR], alert=True),
            PANEL_LIST: Panel(PANEL_LIST, "Objects", rects[PANEL_LIST], highlight=True),
            PANEL_DETAIL: Panel(PANEL_DETAIL, TITLE_DETAIL, rects[PANEL_DETAIL]),
        }
        self.panel_query.editor.set_text(first_query)
        self.panel_filter.editor.set_text(self.state.filter_text)

        self.bindings = build_binding_table(
            MonitorKeyActions(
                submit_query=self.submit_query,
                redraw_table=self.redraw_table,
                choose_focus=self.choose_focus,
                toggle_mode=self.toggle_mode,
                move_selection=self.move_selection,
                shift_by_pages=self.shift_by_pages,
            )
        )

    @property
    def panel_query(self) -> Panel:
        return self.panels[PANEL_QUERY]

    @property
    def panel_filter(self) -> Panel:
        return self.panels[PANEL_FILTER]

    @property
    def panel_error(self) -> Panel:
        return self.panels[PANEL_ERROR]

    @property
    def panel_list(self) -> Panel:
        return self.panels[PANEL_LIST]

    @property
    def panel_detail(self) -> Panel:
        return self.panels[PANEL_DETAIL]

    def start(self) -> None:
        """Run the initial query and give focus to the query panel."""
        self.submit_query()
        self.choose_focus(FOCUS_QUERY)

    # Focus

    def choose_focus(self, name: str) -> None:
        """Focus panel ``name``; every other panel loses its focus mark."""
        if name not in self.panels:
            raise KeyError(f"unknown panel {name!r}")
        self.state.focus = name
        for panel in self.panels.values():
            panel.focused = panel.name == name
        self.state.dirty = True

    def focused_panel(self) -> Panel:
        return self.panels[self.state.focus]

    def handle_key(self, key: str) -> bool:
        """Dispatch one key token; return whether the application should quit."""
        handled, should_quit = handle_key(key, self.state.focus, self.bindings, self.focused_panel().editor)
        if handled:
            self.state.dirty = True
        return should_quit

    # Query pipeline

    def execute(self) -> None:
        execute_query(self.state, self.source, self.panel_query.buffer())
        self.redraw_error()

    def submit_query(self) -> None:
        """Fetch, sort and redraw list plus the active detail/table view."""
        self.execute()
        self.redraw_list()
        self.redraw_table()
        if self.state.last_error is None:
            self.redraw_detail()

    def select_key(self, name: str) -> None:
        """Sort and label the list by key ``name`` (empty restores primary keys)."""
        select_key(self.state, name)
        self.redraw_list()
        self.redraw_table()
        self.redraw_detail()

    # Renderers

    def redraw_error(self) -> None:
        panel = self.panel_error
        panel.clear()
        error = self.state.last_error
        if error is None:
            return
        message = str(error) or type(error).__name__
        width, _ = panel.size()
        lines = textwrap.wrap(message, width=max(1, width)) or [message]
        panel.write("\n".join(lines))

    def redraw_list(self) -> None:
        """Write one row per item and reset the list viewport to the top."""
        panel = self.panel_list
        panel.clear()
        self.panel_detail.clear()
        rows = [
            single_line(effective_key_value(item, self.state.active_key))
            for item in self.state.items
        ]
        panel.write("\n".join(rows))
        panel.set_origin(0, 0)
        panel.set_cursor(0, 0)
        self.state.dirty = True

    def redraw_detail(self) -> None:
        """Show the selected item's detail; no-op in table mode."""
        if self.state.mode != MODE_DETAIL:
            return
        panel = self.panel_detail
        item = selected_item(self.state.items, self.panel_list.selected_row())
        panel.clear()
        panel.write(render_detail(item, color=self.color, style=self.config.style))
        self.state.dirty = True

    def redraw_table(self) -> None:
        """Rebuild the table from the current filter text; no-op in detail mode."""
        if self.state.mode != MODE_TABLE:
            return
        self.state.filter_text = self.panel_filter.buffer()
        matchers = compile_filters(self.state.filter_text)
        panel = self.panel_detail
        panel.clear()
        panel.write(render_table(self.state.items, self.state.active_key, matchers))
        self.align_table_on_list()
        self.state.dirty = True

    def toggle_mode(self) -> None:
        panel = self.panel_detail
        if self.state.mode == MODE_TABLE:
            self.state.mode = MODE_DETAIL
            panel.title = TITLE_DETAIL
            panel.highlight = False
            panel.set_origin(0, 0)
            panel.set_cursor(0, 0)
        else:
            self.state.mode = MODE_TABLE
            panel.title = TITLE_TABLE
            panel.highlight = True
            self.redraw_table()
        self.redraw_detail()
        logger.debug("switched to %s mode", self.state.mode)

    # Viewport

    def align_table_on_list(self) -> None:
        """Copy the list's vertical origin and cursor onto the table panel."""
        if self.state.mode != MODE_TABLE:
            return
        source = self.panel_list
        try:
            self.panel_detail.set_origin(0, source.origin_y)
            self.panel_detail.set_cursor(0, source.cursor_y)
        except PanelPositionError as exc:
            raise ViewportError(f"align table on list: {exc}") from exc

    def move_selection(self, delta: int) -> None:
        self.panel_list.move_cursor(delta)
        self.redraw_detail()
        self.align_table_on_list()

    def shift_by_pages(self, nb: int) -> None:
        """Move the list selection ``nb`` pages and redraw the dependent view."""
        panel = self.panel_list
        count = len(panel.lines())
        _, vy = panel.size()
        ox0, oy0 = panel.origin
        cx0, cy0 = panel.cursor
        shift = compute_page_shift(count, vy, oy0, cy0, nb)
        try:
            panel.set_cursor(cx0, shift.cursor_y)
            panel.set_origin(ox0, shift.origin_y)
        except PanelPositionError as exc:
            raise ViewportError(
                f"PAGE count={count} pos={oy0 + cy0}..{shift.target} region={shift.region} "
                f"cursor=({cx0},{cy0})..({cx0},{shift.cursor_y}) "
                f"origin=({ox0},{oy0})..({ox0},{shift.origin_y}): {exc}"
            ) from exc
        if shift.clamped_origin:
            logger.debug("page origin clamped to %d for %d rows in a %d-row viewport", shift.origin_y, count, vy)
        self.redraw_detail()
        self.align_table_on_list()

    # Layout and frames

    def _layout_rects(self):
        return compute_layout(
            self.state.columns,
            self.state.rows,
            list_width=self.config.list_width,
            error_width=self.config.error_width,
        )

    def layout(self, columns: int, rows: int) -> None:
        """Fit every panel to a ``columns`` x ``rows`` terminal."""
        self.state.columns = columns
        self.state.rows = rows
        rects = self._layout_rects()
        for name in PANEL_NAMES:
            self.panels[name].set_rect(rects[name])
        self.redraw_error()
        self.align_table_on_list()
        self.state.dirty = True

    def render(self) -> str:
        return render_frame(
            [self.panels[name] for name in PANEL_NAMES],
            self.state.columns,
            self.state.rows,
            self.theme,
        )


def run_monitor(
    source: Source,
    first_query: str,
    *,
    no_color: bool = False,
    theme_name: str | None = None,
    style: str | None = None,
    active_key: str = "",
    config: MonitorConfig | None = None,
) -> None:
    """Run the interactive monitor until the user quits.

    Raises ``TerminalInitError`` when stdin/stdout are not terminals and
    ``ViewportError`` when a computed viewport position is rejected.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise TerminalInitError("lazymonitor needs an interactive terminal")

    if config is None:
        config = load_monitor_config()
    if style is not None:
        config = replace(config, style=style)
    term = shutil.get_terminal_size((80, 24))
    app = MonitorApp(
        source,
        first_query,
        config=config,
        theme=resolve_theme(theme_name or config.theme, no_color=no_color),
        color=not no_color,
        active_key=active_key,
        columns=term.columns,
        rows=term.lines,
    )
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(app, terminal, stdin_fd)
