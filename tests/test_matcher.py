import unittest

from wordsearch.core.constants import HIGHLIGHT_PALETTE, Direction
from wordsearch.core.models import WordEntry
from wordsearch.engine.grid import WordSearchGrid
from wordsearch.game.matcher import MatchResolver, MatchStatus


def _grid() -> WordSearchGrid:
    """6x8 grid with CAT across the top row and DOG down the last column."""

    grid = WordSearchGrid(8, 6)
    grid.place_word(WordEntry.from_word("CAT"), 0, 0, Direction.HORIZONTAL)
    grid.place_word(WordEntry.from_word("DOG"), 0, 5, Direction.VERTICAL)
    for cell in grid.cells:
        if cell.is_empty():
            cell.letter = "X"
    return grid


class MatchResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = MatchResolver(_grid(), ["CAT", "DOG"], min_word_length=3)

    def test_forward_selection_matches(self) -> None:
        outcome = self.resolver.resolve([0, 1, 2])
        self.assertEqual(outcome.status, MatchStatus.FOUND)
        self.assertEqual(outcome.word, "CAT")
        self.assertFalse(outcome.reversed)
        self.assertEqual(self.resolver.found_words, {"CAT"})

    def test_reversed_selection_matches_in_reading_order(self) -> None:
        outcome = self.resolver.resolve([2, 1, 0])
        self.assertEqual(outcome.word, "CAT")
        self.assertTrue(outcome.reversed)
        self.assertEqual(outcome.cells, [0, 1, 2])
        self.assertEqual(self.resolver.found_words, {"CAT"})

    def test_short_selection_is_rejected(self) -> None:
        outcome = self.resolver.resolve([0, 1])
        self.assertEqual(outcome.status, MatchStatus.TOO_SHORT)
        self.assertEqual(self.resolver.found_words, set())

    def test_unknown_letters_are_not_found(self) -> None:
        outcome = self.resolver.resolve([6, 7, 8])
        self.assertEqual(outcome.status, MatchStatus.NOT_FOUND)
        self.assertEqual(outcome.message, "Word not found in list")

    def test_reselecting_found_word_does_not_double_count(self) -> None:
        self.resolver.resolve([0, 1, 2])
        again = self.resolver.resolve([0, 1, 2])
        self.assertEqual(again.status, MatchStatus.NOT_FOUND)
        self.assertEqual(len(self.resolver.found_words), 1)

    def test_last_word_solves_puzzle(self) -> None:
        self.resolver.resolve([0, 1, 2])
        outcome = self.resolver.resolve([17, 11, 5])
        self.assertEqual(outcome.status, MatchStatus.SOLVED)
        self.assertTrue(self.resolver.solved)
        self.assertEqual(self.resolver.outstanding, [])

    def test_palette_cycles_by_found_count(self) -> None:
        first = self.resolver.resolve([0, 1, 2])
        second = self.resolver.resolve([5, 11, 17])
        self.assertEqual(first.color, HIGHLIGHT_PALETTE[0])
        self.assertEqual(second.color, HIGHLIGHT_PALETTE[1])
        colors = self.resolver.cell_colors()
        self.assertEqual(colors[0], HIGHLIGHT_PALETTE[0])
        self.assertEqual(colors[17], HIGHLIGHT_PALETTE[1])

    def test_comparison_ignores_case(self) -> None:
        resolver = MatchResolver(_grid(), ["cat"], min_word_length=3)
        outcome = resolver.resolve([0, 1, 2])
        self.assertEqual(outcome.status, MatchStatus.SOLVED)
        self.assertEqual(outcome.word, "cat")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
