"""Frame composition and detail text tests.

Uses the plain theme so boxed rows can be compared as literal strings.
"""

from __future__ import annotations

import json
import unittest

from lazymonitor.ansi import display_width, strip_ansi
from lazymonitor.layout import Rect
from lazymonitor.panels import Panel
from lazymonitor.render import compose_frame, panel_content_rows, panel_rows, render_frame
from lazymonitor.render.detail import colorize_detail, normalize_style, render_detail, selected_item
from lazymonitor.sources.synthetic import MapItem
from lazymonitor.ui_theme import PLAIN_THEME


class PanelRowsTests(unittest.TestCase):
    def test_boxed_panel_clips_and_pads_content(self) -> None:
        panel = Panel("detail", "Detail", Rect(0, 0, 11, 3))
        panel.write("hello world\nx")

        self.assertEqual(
            panel_rows(panel, PLAIN_THEME),
            ["┌─ Detail ─┐", "│hello worl│", "│x         │", "└──────────┘"],
        )

    def test_rows_follow_panel_origin(self) -> None:
        panel = Panel("list", "", Rect(0, 0, 5, 3))
        panel.write("a\nb\nc\nd")
        panel.set_origin(0, 2)

        self.assertEqual(panel_content_rows(panel, PLAIN_THEME), ["c   ", "d   "])

    def test_cursor_row_is_highlighted(self) -> None:
        panel = Panel("list", "", Rect(0, 0, 5, 3), highlight=True)
        panel.write("a\nb")
        panel.set_cursor(0, 1)

        rows = panel_content_rows(panel, PLAIN_THEME)
        self.assertEqual(rows[0], "a   ")
        self.assertTrue(rows[1].startswith(PLAIN_THEME.cursor_row))
        self.assertEqual(strip_ansi(rows[1]), "b   ")

    def test_alert_panel_text_uses_error_style(self) -> None:
        panel = Panel("error", "Error", Rect(0, 0, 10, 3), alert=True)
        panel.write("boom")

        rows = panel_content_rows(panel, PLAIN_THEME)
        self.assertTrue(rows[0].startswith(PLAIN_THEME.error_text))
        self.assertEqual(rows[1], " " * 9)

    def test_focused_editor_shows_caret(self) -> None:
        panel = Panel("query", "Query", Rect(0, 0, 10, 2), editable=True)
        assert panel.editor is not None
        panel.editor.set_text("ab")
        panel.focused = True

        (row,) = panel_content_rows(panel, PLAIN_THEME)
        self.assertIn(PLAIN_THEME.editor_caret + " " + PLAIN_THEME.reset, row)
        self.assertEqual(display_width(row), 9)


class FrameTests(unittest.TestCase):
    def test_panels_are_placed_side_by_side(self) -> None:
        left = Panel("a", "", Rect(0, 0, 3, 2))
        right = Panel("b", "", Rect(4, 0, 7, 2))

        screen = compose_frame([left, right], columns=10, rows=4, theme=PLAIN_THEME)

        self.assertEqual(screen, ["┌──┐┌──┐  ", "│  ││  │  ", "└──┘└──┘  ", " " * 10])

    def test_render_frame_homes_cursor_and_joins_rows(self) -> None:
        panel = Panel("a", "", Rect(0, 0, 3, 2))
        frame = render_frame([panel], columns=6, rows=5, theme=PLAIN_THEME)

        self.assertTrue(frame.startswith("\033[H\033[J"))
        self.assertTrue(frame.endswith(PLAIN_THEME.reset))
        self.assertEqual(frame.count("\r\n"), 4)


class DetailTextTests(unittest.TestCase):
    def test_selected_item_bounds(self) -> None:
        items = [MapItem({"a": "1"})]
        self.assertIs(selected_item(items, 0), items[0])
        self.assertIsNone(selected_item(items, 1))
        self.assertIsNone(selected_item(items, -1))

    def test_detail_is_verbatim_without_color(self) -> None:
        item = MapItem({"a": "1"})
        self.assertEqual(render_detail(item, color=False), item.detail())
        self.assertEqual(render_detail(None, color=True), "")

    def test_json_detail_is_colorized_without_changing_text(self) -> None:
        item = MapItem({"a": "1", "b": "2"})
        rendered = render_detail(item, color=True)

        self.assertIn("\x1b[", rendered)
        self.assertEqual(json.loads(strip_ansi(rendered)), item.fields)
        self.assertTrue(rendered.endswith("\n"))

    def test_plain_text_is_not_colorized(self) -> None:
        self.assertEqual(colorize_detail("not json"), "not json")

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style"), "monokai")
        self.assertEqual(normalize_style("monokai"), "monokai")


if __name__ == "__main__":
    unittest.main()
