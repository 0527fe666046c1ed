"""Table view rendering and tab-stop alignment tests."""

from __future__ import annotations

import unittest

from lazymonitor.filters import compile_filters
from lazymonitor.render.table import align_columns, column_widths, render_table, table_rows
from lazymonitor.sources.synthetic import MapItem


def _items() -> list[MapItem]:
    return [
        MapItem({"path": "a", "size": "10", "mode": "-rw"}),
        MapItem({"path": "bb", "size": "2000000000", "mode": "drwx"}),
    ]


class TableRenderTests(unittest.TestCase):
    def test_effective_key_column_is_omitted(self) -> None:
        text = render_table(_items(), "", compile_filters(".*"))
        self.assertEqual(text.split("\n"), ["10          -rw", "2000000000  drwx"])

    def test_active_key_replaces_primary_key_as_omitted_column(self) -> None:
        rows = table_rows(_items(), "size", compile_filters(".*"))
        self.assertEqual(rows, [["a", "-rw"], ["bb", "drwx"]])
        self.assertEqual(align_columns(rows).split("\n"), ["a       -rw", "bb      drwx"])

    def test_filter_limits_columns(self) -> None:
        text = render_table(_items(), "", compile_filters("^mode$"))
        self.assertEqual(text, "-rw\ndrwx")

    def test_no_matchers_leave_one_empty_row_per_item(self) -> None:
        self.assertEqual(render_table(_items(), "", []), "\n")

    def test_no_items_render_empty_table(self) -> None:
        self.assertEqual(render_table([], "", compile_filters(".*")), "")

    def test_ragged_rows_share_column_widths(self) -> None:
        rows = [["a", "b", "c"], ["dddddddddd", "e"]]
        self.assertEqual(column_widths(rows), [12, 8])
        self.assertEqual(
            align_columns(rows).split("\n"),
            ["a" + " " * 11 + "b" + " " * 7 + "c", "dddddddddd  e"],
        )

    def test_multiline_values_stay_on_their_item_row(self) -> None:
        items = [MapItem({"name": "a", "note": "line1\nline2"}), MapItem({"name": "b", "note": "z"})]
        self.assertEqual(render_table(items, "", compile_filters(".*")).split("\n"), ["line1 line2", "z"])

    def test_wide_characters_are_measured_in_columns(self) -> None:
        rows = [["日本語日本語", "x"], ["a", "y"]]
        self.assertEqual(column_widths(rows), [14])


if __name__ == "__main__":
    unittest.main()
