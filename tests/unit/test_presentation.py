"""Wrap and truncation policy tests for summary presentation."""

from __future__ import annotations

import unittest

from layerview.presentation import MAX_LINES, TRUNCATED_MARKER, WRAP_WIDTH, present_summary


class PresentSummaryTests(unittest.TestCase):
    def test_short_text_is_single_line(self) -> None:
        presented = present_summary(" hello world")

        self.assertEqual(presented.lines, ("hello world",))
        self.assertFalse(presented.truncated)
        self.assertEqual(presented.display_lines(), ["hello world"])

    def test_wraps_at_requested_width(self) -> None:
        presented = present_summary("aaa bbb ccc ddd", width=7)

        self.assertEqual(presented.lines, ("aaa bbb", "ccc ddd"))

    def test_long_text_is_truncated_with_marker(self) -> None:
        text = " ".join(["word"] * 2000)

        presented = present_summary(text)

        self.assertTrue(presented.truncated)
        self.assertEqual(len(presented.lines), MAX_LINES)
        self.assertTrue(all(len(line) <= WRAP_WIDTH for line in presented.lines))
        self.assertEqual(presented.display_lines()[-1], TRUNCATED_MARKER)

    def test_exactly_max_lines_is_not_truncated(self) -> None:
        text = " ".join(["abcd"] * 4)

        presented = present_summary(text, width=4, max_lines=4)

        self.assertEqual(len(presented.lines), 4)
        self.assertFalse(presented.truncated)

    def test_empty_text_has_no_lines(self) -> None:
        presented = present_summary("")

        self.assertEqual(presented.lines, ())
        self.assertEqual(presented.display_lines(), [])


if __name__ == "__main__":
    unittest.main()
