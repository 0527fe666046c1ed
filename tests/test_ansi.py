"""Regression tests for ANSI-aware width and clipping helpers.

These cases protect panel row padding when detail text carries color codes.
"""

import unittest

from lazymonitor import ansi as ansi_mod


class AnsiWidthTests(unittest.TestCase):
    def test_escape_sequences_do_not_count_toward_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[31mred\033[0m"), 3)

    def test_wide_and_tab_characters(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("ab\tc"), 9)

    def test_clip_keeps_escapes_and_stops_before_wide_overflow(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\033[1mabcdef", 3), "\033[1mabc")
        self.assertEqual(ansi_mod.clip_ansi_line("a日本", 2), "a")

    def test_fit_pads_and_resets_styled_text(self) -> None:
        self.assertEqual(ansi_mod.fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(ansi_mod.fit_ansi_line("\033[1mab", 3), "\033[1mab\033[0m ")
        self.assertEqual(ansi_mod.fit_ansi_line("abcdef", 0), "")


if __name__ == "__main__":
    unittest.main()
