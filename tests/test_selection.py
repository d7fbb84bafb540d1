import unittest

from wordsearch.core.constants import Bounds
from wordsearch.game.selection import SelectionTracker


class SelectionTrackerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tracker = SelectionTracker(Bounds(rows=8, cols=6))

    def test_horizontal_drag(self) -> None:
        self.tracker.down(0)
        self.tracker.move(1)
        self.assertEqual(self.tracker.move(2), [0, 1, 2])

    def test_reverse_horizontal_drag(self) -> None:
        self.tracker.down(2)
        self.assertEqual(self.tracker.move(0), [2, 1, 0])

    def test_vertical_drag(self) -> None:
        self.tracker.down(1)
        self.assertEqual(self.tracker.move(19), [1, 7, 13, 19])

    def test_diagonal_drags(self) -> None:
        self.tracker.down(0)
        self.assertEqual(self.tracker.move(14), [0, 7, 14])
        self.tracker.down(12)
        self.assertEqual(self.tracker.move(2), [12, 7, 2])

    def test_non_straight_move_is_ignored(self) -> None:
        self.tracker.down(0)
        self.tracker.move(2)
        self.assertEqual(self.tracker.move(8), [0, 1, 2])

    def test_selection_is_recomputed_from_anchor(self) -> None:
        self.tracker.down(0)
        self.tracker.move(3)
        self.tracker.move(1)
        self.assertEqual(self.tracker.selection, [0, 1])
        self.tracker.move(4)
        self.tracker.move(4)
        self.assertEqual(self.tracker.selection, [0, 1, 2, 3, 4])

    def test_move_back_to_anchor_keeps_single_cell(self) -> None:
        self.tracker.down(7)
        self.tracker.move(9)
        self.assertEqual(self.tracker.move(7), [7])

    def test_move_without_down_is_ignored(self) -> None:
        self.assertEqual(self.tracker.move(3), [])
        self.assertFalse(self.tracker.active)

    def test_out_of_grid_index_is_ignored(self) -> None:
        self.tracker.down(0)
        self.tracker.move(1)
        self.assertEqual(self.tracker.move(48), [0, 1])

    def test_up_returns_selection_and_clears(self) -> None:
        self.tracker.down(0)
        self.tracker.move(2)
        self.assertEqual(self.tracker.up(), [0, 1, 2])
        self.assertEqual(self.tracker.selection, [])
        self.assertIsNone(self.tracker.anchor)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
