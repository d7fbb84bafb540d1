"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MAX_PLACEMENT_ATTEMPTS = 500
MAX_TOTAL_ATTEMPTS = 2000
MAX_RETRIES = 5

# Highlight colours cycled over found words.
HIGHLIGHT_PALETTE: Tuple[str, ...] = (
    "rgba(122, 255, 195, 0.7)",
    "rgba(142, 196, 250, 0.7)",
    "rgba(255, 216, 117, 0.7)",
    "rgba(255, 158, 232, 0.7)",
)


class Difficulty(str, Enum):
    """Word search difficulty tiers."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def next_tier(self) -> "Difficulty":
        if self is Difficulty.EASY:
            return Difficulty.MEDIUM
        return Difficulty.HARD


class DirectionCategory(str, Enum):
    """Groups directions for quota balancing."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class Direction(Enum):
    """Placement directions as ``(row_step, col_step, category)``."""

    HORIZONTAL = (0, 1, DirectionCategory.HORIZONTAL)
    VERTICAL = (1, 0, DirectionCategory.VERTICAL)
    DIAGONAL_DOWN_RIGHT = (1, 1, DirectionCategory.DIAGONAL)
    DIAGONAL_UP_RIGHT = (-1, 1, DirectionCategory.DIAGONAL)

    def __init__(self, row_step: int, col_step: int, category: DirectionCategory) -> None:
        self.row_step = row_step
        self.col_step = col_step
        self.category = category

    @property
    def step(self) -> Tuple[int, int]:
        return self.row_step, self.col_step


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def to_index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def to_coords(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.cols)


@dataclass(frozen=True)
class DifficultyConfig:
    """Per-tier puzzle dimensions and limits."""

    grid_cols: int
    grid_rows: int
    min_word_length: int
    max_word_length: int
    word_count: int
    time_limit_seconds: int

    def __post_init__(self) -> None:
        if self.grid_cols <= 0 or self.grid_rows <= 0:
            raise ValueError("Grid dimensions must be positive")
        if self.min_word_length <= 0 or self.max_word_length < self.min_word_length:
            raise ValueError(
                f"Invalid word length range {self.min_word_length}-{self.max_word_length}"
            )
        if self.word_count <= 0:
            raise ValueError("word_count must be positive")

    def bounds(self) -> Bounds:
        return Bounds(rows=self.grid_rows, cols=self.grid_cols)


DIFFICULTY_CONFIGS: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(
        grid_cols=6, grid_rows=8, min_word_length=3, max_word_length=5,
        word_count=6, time_limit_seconds=240,
    ),
    Difficulty.MEDIUM: DifficultyConfig(
        grid_cols=8, grid_rows=10, min_word_length=4, max_word_length=7,
        word_count=8, time_limit_seconds=300,
    ),
    Difficulty.HARD: DifficultyConfig(
        grid_cols=10, grid_rows=10, min_word_length=5, max_word_length=8,
        word_count=10, time_limit_seconds=500,
    ),
}
