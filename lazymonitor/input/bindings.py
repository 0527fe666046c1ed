"""Focus state machine: which key does what in which panel.

The transitions are declared as one binding table keyed by focus state and
key token. Handlers return ``True`` when the application should quit.

=========  ========  ======================================  ========
Key        Focus     Action                                  Next
=========  ========  ======================================  ========
TAB        query     run query, redraw list and table        filter
TAB        filter    redraw table                            list
TAB        list      -                                       query
ENTER      any       run query, redraw list and table        same
ALT_M      any       toggle detail/table mode                same
CTRL_C     any       quit                                    -
UP/DOWN    list      move cursor one row, redraw detail      list
PGUP/PGDN  list      move one page, redraw detail            list
=========  ========  ======================================  ========
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..panels import LineEditor
from ..state import FOCUS_FILTER, FOCUS_LIST, FOCUS_QUERY
from .key_registry import BindingTable, KeyComboBinding


@dataclass(frozen=True)
class MonitorKeyActions:
    """Engine operations the binding table triggers."""

    submit_query: Callable[[], None]
    redraw_table: Callable[[], None]
    choose_focus: Callable[[str], None]
    toggle_mode: Callable[[], None]
    move_selection: Callable[[int], None]
    shift_by_pages: Callable[[int], None]


def build_binding_table(actions: MonitorKeyActions) -> BindingTable:
    """Return the dispatch table implementing the focus state machine."""

    def tab_from_query() -> bool:
        actions.submit_query()
        actions.choose_focus(FOCUS_FILTER)
        return False

    def tab_from_filter() -> bool:
        actions.redraw_table()
        actions.choose_focus(FOCUS_LIST)
        return False

    def tab_from_list() -> bool:
        actions.choose_focus(FOCUS_QUERY)
        return False

    def submit() -> bool:
        actions.submit_query()
        return False

    def toggle_mode() -> bool:
        actions.toggle_mode()
        return False

    def quit_app() -> bool:
        return True

    def step(delta: int) -> Callable[[], bool]:
        def handler() -> bool:
            actions.move_selection(delta)
            return False

        return handler

    def page(nb: int) -> Callable[[], bool]:
        def handler() -> bool:
            actions.shift_by_pages(nb)
            return False

        return handler

    return BindingTable().register_bindings(
        KeyComboBinding(("TAB",), tab_from_query, scope=FOCUS_QUERY),
        KeyComboBinding(("TAB",), tab_from_filter, scope=FOCUS_FILTER),
        KeyComboBinding(("TAB",), tab_from_list, scope=FOCUS_LIST),
        KeyComboBinding(("ENTER",), submit),
        KeyComboBinding(("ALT_M",), toggle_mode),
        KeyComboBinding(("CTRL_C",), quit_app),
        KeyComboBinding(("UP",), step(-1), scope=FOCUS_LIST),
        KeyComboBinding(("DOWN",), step(1), scope=FOCUS_LIST),
        KeyComboBinding(("PGUP",), page(-1), scope=FOCUS_LIST),
        KeyComboBinding(("PGDN",), page(1), scope=FOCUS_LIST),
    )


def handle_key(
    key: str,
    focus: str,
    table: BindingTable,
    editor: LineEditor | None = None,
) -> tuple[bool, bool]:
    """Dispatch one key for the focused panel.

    Unbound keys go to ``editor`` when the focused panel is editable.
    Returns ``(handled, should_quit)``.
    """
    result = table.dispatch(focus, key)
    if result is not None:
        return True, bool(result)
    if editor is not None and editor.handle_key(key):
        return True, False
    return False, False
