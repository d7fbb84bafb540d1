"""Grid representation and helper utilities."""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..core.constants import ALPHABET, Bounds, Direction
from ..core.exceptions import PlacementError
from ..core.models import Cell, PlacedWord, WordEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordSearchGrid:
    """Flat ``rows * cols`` cell matrix with placement helpers."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[Cell] = [Cell() for _ in range(self.bounds.size)]
        self.placed_words: Dict[str, PlacedWord] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def __len__(self) -> int:
        return len(self.cells)

    def letter_at(self, index: int) -> str:
        return self.cells[index].letter

    def letters(self, indices: List[int]) -> str:
        return "".join(self.cells[index].letter for index in indices)

    def path(self, row: int, col: int, direction: Direction, length: int) -> Optional[List[int]]:
        """Return the cell indices of a run, or ``None`` if it leaves the grid."""

        indices: List[int] = []
        for offset in range(length):
            r = row + offset * direction.row_step
            c = col + offset * direction.col_step
            if not self.bounds.contains(r, c):
                return None
            indices.append(self.bounds.to_index(r, c))
        return indices

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def can_place(self, entry: WordEntry, row: int, col: int, direction: Direction) -> bool:
        indices = self.path(row, col, direction, len(entry))
        if indices is None:
            return False
        for index, letter in zip(indices, entry.letters):
            existing = self.cells[index].letter
            if existing and existing != letter:
                return False
        return not self._duplicates_run(indices)

    def place_word(self, entry: WordEntry, row: int, col: int, direction: Direction) -> PlacedWord:
        indices = self.path(row, col, direction, len(entry))
        if indices is None:
            raise PlacementError(f"{entry.word} extends outside grid from {(row, col)}")
        for index, letter in zip(indices, entry.letters):
            existing = self.cells[index].letter
            if existing and existing != letter:
                raise PlacementError(f"Letter conflict for {entry.word} at cell {index}")
        if self._duplicates_run(indices):
            raise PlacementError(f"{entry.word} would reuse another word's exact cells")

        # All checks passed, mutate grid
        for index, letter in zip(indices, entry.letters):
            cell = self.cells[index]
            cell.letter = letter
            if cell.owner_word is None:
                cell.owner_word = entry.word

        placed = PlacedWord(
            word=entry.word,
            start_row=row,
            start_col=col,
            direction=direction,
            cells=indices,
        )
        self.placed_words[entry.word] = placed
        return placed

    def _duplicates_run(self, indices: List[int]) -> bool:
        reversed_indices = indices[::-1]
        for placed in self.placed_words.values():
            if placed.cells == indices or placed.cells == reversed_indices:
                return True
        return False

    def fill_empty_cells(self, rng: Optional[random.Random] = None) -> int:
        """Assign a random letter to every empty cell and return how many."""

        rng = rng or random.Random()
        filled = 0
        for cell in self.cells:
            if cell.is_empty():
                cell.letter = rng.choice(ALPHABET)
                filled += 1
        LOGGER.debug("Filled %s empty cells with random letters", filled)
        return filled

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self) -> List[List[str]]:
        return [
            [self.cells[self.bounds.to_index(r, c)].letter for c in range(self.cols)]
            for r in range(self.rows)
        ]
