"""Column filter compilation tests."""

from __future__ import annotations

import unittest

from lazymonitor.filters import compile_filters, matches_any, split_filter_text


class FilterCompileTests(unittest.TestCase):
    def test_default_filter_matches_every_key(self) -> None:
        matchers = compile_filters(".*")
        for key in ("path", "size", ""):
            self.assertTrue(matches_any(matchers, key))

    def test_tokens_are_trimmed_and_matched_anywhere_in_key(self) -> None:
        self.assertEqual(split_filter_text("^size$, mode\t"), ["^size$", "mode"])
        matchers = compile_filters("^size$, mode\t")

        self.assertTrue(matches_any(matchers, "size"))
        self.assertTrue(matches_any(matchers, "filemode"))
        self.assertFalse(matches_any(matchers, "sizes"))
        self.assertFalse(matches_any(matchers, "path"))

    def test_invalid_patterns_are_dropped(self) -> None:
        matchers = compile_filters("(, path")
        self.assertEqual(len(matchers), 1)
        self.assertTrue(matches_any(matchers, "path"))
        self.assertFalse(matches_any(matchers, "("))

    def test_only_invalid_patterns_hide_every_key(self) -> None:
        self.assertEqual(compile_filters("[unclosed"), [])
        self.assertFalse(matches_any([], "path"))

    def test_empty_token_matches_every_key(self) -> None:
        matchers = compile_filters("^size$,")
        self.assertEqual(len(matchers), 2)
        self.assertTrue(matches_any(matchers, "anything"))


if __name__ == "__main__":
    unittest.main()
