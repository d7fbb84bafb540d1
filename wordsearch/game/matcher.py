"""Resolve finalized selections against the outstanding word list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set

from ..core.constants import HIGHLIGHT_PALETTE
from ..engine.grid import WordSearchGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class MatchStatus(str, Enum):
    FOUND = "found"
    SOLVED = "solved"
    TOO_SHORT = "too_short"
    NOT_FOUND = "not_found"


@dataclass
class MatchOutcome:
    status: MatchStatus
    word: Optional[str] = None
    cells: List[int] = field(default_factory=list)
    color: Optional[str] = None
    reversed: bool = False

    @property
    def matched(self) -> bool:
        return self.status in (MatchStatus.FOUND, MatchStatus.SOLVED)

    @property
    def message(self) -> str:
        if self.status is MatchStatus.TOO_SHORT:
            return "Selection too short"
        if self.status is MatchStatus.NOT_FOUND:
            return "Word not found in list"
        return f"Found: {self.word}"


@dataclass
class FoundWord:
    word: str
    cells: List[int]
    color: str


class MatchResolver:
    """Tracks found words for one puzzle and matches selections."""

    def __init__(
        self,
        grid: WordSearchGrid,
        words: Sequence[str],
        min_word_length: int,
        palette: Sequence[str] = HIGHLIGHT_PALETTE,
    ) -> None:
        self.grid = grid
        self.words = list(words)
        self.min_word_length = min_word_length
        self.palette = tuple(palette)
        self.found: Dict[str, FoundWord] = {}

    @property
    def found_words(self) -> Set[str]:
        return set(self.found)

    @property
    def outstanding(self) -> List[str]:
        return [word for word in self.words if word not in self.found]

    @property
    def solved(self) -> bool:
        return bool(self.words) and len(self.found) == len(self.words)

    def cell_colors(self) -> Dict[int, str]:
        """Latest highlight colour per cell, in discovery order."""

        colors: Dict[int, str] = {}
        for found in self.found.values():
            for index in found.cells:
                colors[index] = found.color
        return colors

    def resolve(self, selection: Sequence[int]) -> MatchOutcome:
        if len(selection) < self.min_word_length:
            return MatchOutcome(status=MatchStatus.TOO_SHORT)

        forward = self.grid.letters(list(selection)).upper()
        backward = forward[::-1]

        for word in self.outstanding:
            target = word.upper()
            if target == forward:
                return self._record(word, list(selection), reversed_match=False)
            if target == backward:
                return self._record(word, list(reversed(selection)), reversed_match=True)

        LOGGER.debug("Selection %s spells %s; no outstanding match", list(selection), forward)
        return MatchOutcome(status=MatchStatus.NOT_FOUND)

    def _record(self, word: str, cells: List[int], reversed_match: bool) -> MatchOutcome:
        color = self.palette[len(self.found) % len(self.palette)]
        self.found[word] = FoundWord(word=word, cells=cells, color=color)
        status = MatchStatus.SOLVED if self.solved else MatchStatus.FOUND
        LOGGER.info("Found %s (%s/%s)", word, len(self.found), len(self.words))
        return MatchOutcome(
            status=status,
            word=word,
            cells=cells,
            color=color,
            reversed=reversed_match,
        )
