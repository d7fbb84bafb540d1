"""Deterministic rule validation for generated word search grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .grid import WordSearchGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over the final grid."""

    def validate(self, grid: WordSearchGrid, placed_words: Iterable[PlacedWord]) -> ValidationResult:
        placed = list(placed_words)
        try:
            self._check_coverage(grid)
            self._check_words_traceable(grid, placed)
            self._check_no_collisions(placed)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_coverage(self, grid: WordSearchGrid) -> None:
        for index, cell in enumerate(grid.cells):
            if len(cell.letter) != 1 or cell.letter not in ALPHABET:
                raise ValidationError(f"Invalid letter '{cell.letter}' at cell {index}")

    def _check_words_traceable(self, grid: WordSearchGrid, placed: List[PlacedWord]) -> None:
        for word in placed:
            expected = grid.path(word.start_row, word.start_col, word.direction, len(word.word))
            if expected is None or expected != word.cells:
                raise ValidationError(
                    f"Word '{word.word}' cells do not follow {word.direction.name}"
                )
            if grid.letters(word.cells) != word.word:
                raise ValidationError(f"Word '{word.word}' is not spelled along its cells")
            if any(grid.cells[index].owner_word is None for index in word.cells):
                raise ValidationError(f"Word '{word.word}' has untagged filler cells")

    def _check_no_collisions(self, placed: List[PlacedWord]) -> None:
        seen: Set[Tuple[int, ...]] = set()
        for word in placed:
            key = tuple(word.cells)
            if key in seen or tuple(reversed(key)) in seen:
                raise ValidationError(f"Word '{word.word}' reuses another word's cells")
            seen.add(key)
