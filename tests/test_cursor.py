"""Tests for cursor arithmetic used by every list picker."""

from __future__ import annotations

import unittest

from lazypick.selection.cursor import clamp_cursor, move_cursor, move_down, move_up


class CursorMathTests(unittest.TestCase):
    def test_move_up_stops_at_zero(self) -> None:
        self.assertEqual(move_up(3), 2)
        self.assertEqual(move_up(0), 0)

    def test_move_down_stops_at_last_index(self) -> None:
        self.assertEqual(move_down(1, 4), 2)
        self.assertEqual(move_down(4, 4), 4)

    def test_move_down_on_empty_list_leaves_cursor(self) -> None:
        self.assertEqual(move_down(2, -1), 2)

    def test_clamp_bounds_cursor_for_every_value(self) -> None:
        for max_index in range(0, 5):
            for cursor in range(-3, 9):
                clamped = clamp_cursor(cursor, max_index)
                self.assertGreaterEqual(clamped, 0)
                self.assertLessEqual(clamped, max_index)

    def test_clamp_on_empty_list_is_zero(self) -> None:
        self.assertEqual(clamp_cursor(7, -1), 0)
        self.assertEqual(clamp_cursor(-2, -1), 0)

    def test_move_cursor_direction(self) -> None:
        self.assertEqual(move_cursor(2, -1, 5), 1)
        self.assertEqual(move_cursor(2, 1, 5), 3)
        self.assertEqual(move_cursor(2, 0, 5), 2)


if __name__ == "__main__":
    unittest.main()
