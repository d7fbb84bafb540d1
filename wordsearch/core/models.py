"""Data models supporting the word search generator."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .constants import Direction, DirectionCategory


@dataclass(frozen=True)
class WordEntry:
    """A candidate word and its letters."""

    word: str
    letters: Tuple[str, ...]

    @classmethod
    def from_word(cls, word: str) -> "WordEntry":
        upper = word.upper()
        return cls(word=upper, letters=tuple(upper))

    def __len__(self) -> int:
        return len(self.letters)


@dataclass
class Cell:
    """A grid cell; ``owner_word`` is set only for placed-word letters."""

    letter: str = ""
    owner_word: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.letter


@dataclass
class PlacedWord:
    """A word written into the grid along one direction."""

    word: str
    start_row: int
    start_col: int
    direction: Direction
    cells: List[int] = field(default_factory=list)


@dataclass
class DirectionCounts:
    """Running tally of placed words per direction category."""

    counts: Dict[DirectionCategory, int] = field(
        default_factory=lambda: {category: 0 for category in DirectionCategory}
    )

    def increment(self, category: DirectionCategory) -> None:
        self.counts[category] += 1

    def get(self, category: DirectionCategory) -> int:
        return self.counts[category]

    def under_quota(self, category: DirectionCategory, quota: int) -> bool:
        return self.counts[category] < quota

    @staticmethod
    def quota_for(word_count: int) -> int:
        return math.ceil(word_count / 3)


@dataclass
class PuzzleBuildSession:
    """Mutable state owned by a single puzzle build.

    ``used_words`` is usually shared with the owning game session so that
    words persist across regenerations; the counters are local to the build.
    """

    used_words: Set[str] = field(default_factory=set)
    retry_count: int = 0
    direction_counts: DirectionCounts = field(default_factory=DirectionCounts)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class GameSummary:
    """Round summary handed to external stats consumers."""

    words_found: int
    total_words: int
    elapsed_seconds: int
    solved: bool = False
