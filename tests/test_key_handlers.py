"""Focus state machine tests at the binding-table level.

Engine actions are mocks, so these cases only check which action each key
triggers in each focus state.
"""

from __future__ import annotations

import unittest
from unittest import mock

from lazymonitor.input import (
    BindingTable,
    KeyComboBinding,
    MonitorKeyActions,
    build_binding_table,
    handle_key,
)
from lazymonitor.panels import LineEditor


def _actions() -> MonitorKeyActions:
    return MonitorKeyActions(
        submit_query=mock.Mock(),
        redraw_table=mock.Mock(),
        choose_focus=mock.Mock(),
        toggle_mode=mock.Mock(),
        move_selection=mock.Mock(),
        shift_by_pages=mock.Mock(),
    )


class FocusTransitionTests(unittest.TestCase):
    def test_tab_from_query_runs_query_then_focuses_filter(self) -> None:
        actions = _actions()
        table = build_binding_table(actions)

        self.assertEqual(handle_key("TAB", "query", table, LineEditor()), (True, False))

        actions.submit_query.assert_called_once_with()
        actions.choose_focus.assert_called_once_with("filter")

    def test_tab_from_filter_redraws_table_then_focuses_list(self) -> None:
        actions = _actions()
        table = build_binding_table(actions)

        handle_key("TAB", "filter", table, LineEditor())

        actions.redraw_table.assert_called_once_with()
        actions.submit_query.assert_not_called()
        actions.choose_focus.assert_called_once_with("list")

    def test_tab_from_list_returns_to_query(self) -> None:
        actions = _actions()
        handle_key("TAB", "list", build_binding_table(actions))
        actions.choose_focus.assert_called_once_with("query")

    def test_enter_submits_from_any_focus_without_moving_focus(self) -> None:
        for focus in ("query", "filter", "list"):
            actions = _actions()
            handle_key("ENTER", focus, build_binding_table(actions))
            actions.submit_query.assert_called_once_with()
            actions.choose_focus.assert_not_called()

    def test_alt_m_toggles_mode_from_any_focus(self) -> None:
        for focus in ("query", "filter", "list"):
            actions = _actions()
            handle_key("ALT_M", focus, build_binding_table(actions))
            actions.toggle_mode.assert_called_once_with()

    def test_ctrl_c_requests_quit(self) -> None:
        table = build_binding_table(_actions())
        self.assertEqual(handle_key("CTRL_C", "filter", table, LineEditor()), (True, True))


class ListNavigationTests(unittest.TestCase):
    def test_list_keys_move_selection(self) -> None:
        actions = _actions()
        table = build_binding_table(actions)
        for key in ("UP", "DOWN", "PGUP", "PGDN"):
            handle_key(key, "list", table)

        self.assertEqual(actions.move_selection.call_args_list, [mock.call(-1), mock.call(1)])
        self.assertEqual(actions.shift_by_pages.call_args_list, [mock.call(-1), mock.call(1)])

    def test_page_keys_are_ignored_outside_list(self) -> None:
        actions = _actions()
        table = build_binding_table(actions)
        editor = LineEditor("q")

        self.assertEqual(handle_key("PGDN", "query", table, editor), (False, False))
        actions.shift_by_pages.assert_not_called()

    def test_printable_keys_edit_focused_input(self) -> None:
        table = build_binding_table(_actions())
        editor = LineEditor("/var")
        self.assertEqual(handle_key("/", "query", table, editor), (True, False))
        self.assertEqual(editor.text, "/var/")

    def test_printable_keys_are_unhandled_in_list(self) -> None:
        table = build_binding_table(_actions())
        self.assertEqual(handle_key("x", "list", table), (False, False))


class BindingTableTests(unittest.TestCase):
    def test_scoped_binding_shadows_global_binding(self) -> None:
        calls: list[str] = []
        table = BindingTable().register_bindings(
            KeyComboBinding(("k",), lambda: calls.append("global")),
            KeyComboBinding(("k",), lambda: calls.append("list"), scope="list"),
        )

        table.dispatch("list", "k")
        table.dispatch("query", "k")

        self.assertEqual(calls, ["list", "global"])

    def test_unbound_key_dispatches_to_none(self) -> None:
        self.assertIsNone(BindingTable().dispatch("list", "x"))


if __name__ == "__main__":
    unittest.main()
