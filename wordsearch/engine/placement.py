"""Randomized, quota-balanced placement of words onto a grid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional, Sequence

from ..core.constants import MAX_PLACEMENT_ATTEMPTS, MAX_TOTAL_ATTEMPTS, Direction
from ..core.exceptions import GenerationCancelled
from ..core.models import DirectionCounts, PlacedWord, PuzzleBuildSession, WordEntry
from ..utils.logger import get_logger
from .grid import WordSearchGrid


LOGGER = get_logger(__name__)


@dataclass
class PlacementPolicy:
    """Attempt ceilings for a single grid build."""

    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    max_total_attempts: int = MAX_TOTAL_ATTEMPTS
    # Per-direction tries are also capped at this multiple of the number of
    # legal start cells, which keeps small grids cheap.
    attempt_ceiling_factor: int = 4
    long_word_threshold: int = 4

    def attempts_for(self, length: int) -> int:
        if length > self.long_word_threshold:
            return self.max_placement_attempts * 2
        return self.max_placement_attempts


@dataclass
class PlacementReport:
    placed: List[PlacedWord] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)
    total_attempts: int = 0
    target_count: int = 0
    quota_fallback_used: bool = False

    @property
    def complete(self) -> bool:
        return len(self.placed) >= self.target_count


class PlacementEngine:
    """Places words one at a time along balanced random directions."""

    def __init__(
        self,
        policy: PlacementPolicy,
        session: PuzzleBuildSession,
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.policy = policy
        self.session = session
        self.rng = session.rng
        self._is_cancelled = is_cancelled or (lambda: False)
        self._quota_fallback_used = False

    # ------------------------------------------------------------------
    # Direction selection
    # ------------------------------------------------------------------
    def candidate_directions(self, quota: int) -> List[Direction]:
        counts = self.session.direction_counts
        candidates = [d for d in Direction if counts.under_quota(d.category, quota)]
        if not candidates:
            self._quota_fallback_used = True
            candidates = list(Direction)
        self.rng.shuffle(candidates)
        return candidates

    # ------------------------------------------------------------------
    # Single word
    # ------------------------------------------------------------------
    def try_place(self, grid: WordSearchGrid, entry: WordEntry, quota: int) -> Optional[PlacedWord]:
        length = len(entry)
        for direction in self.candidate_directions(quota):
            span_rows = grid.rows - (length - 1) * abs(direction.row_step)
            span_cols = grid.cols - (length - 1) * abs(direction.col_step)
            if span_rows <= 0 or span_cols <= 0:
                continue
            # Upward runs must start low enough to stay inside the grid.
            row_offset = length - 1 if direction.row_step < 0 else 0
            attempts = min(
                self.policy.attempts_for(length),
                self.policy.attempt_ceiling_factor * span_rows * span_cols,
            )
            for _ in range(attempts):
                row = row_offset + self.rng.randrange(span_rows)
                col = self.rng.randrange(span_cols)
                if grid.can_place(entry, row, col, direction):
                    placed = grid.place_word(entry, row, col, direction)
                    self.session.direction_counts.increment(direction.category)
                    LOGGER.debug(
                        "Placed %s at (%s,%s) %s", entry.word, row, col, direction.name
                    )
                    return placed
        return None

    # ------------------------------------------------------------------
    # Whole word list
    # ------------------------------------------------------------------
    def place_all(
        self,
        grid: WordSearchGrid,
        entries: Sequence[WordEntry],
        target_count: int,
    ) -> PlacementReport:
        """Place up to ``target_count`` words from ``entries`` in order.

        Each word that fails every direction costs one unit of the shared
        ``max_total_attempts`` budget. Unplaced words are recycled once the
        list runs out, as long as the previous pass placed something.
        """

        unique: List[WordEntry] = []
        seen = set()
        for entry in entries:
            if entry.word not in seen:
                seen.add(entry.word)
                unique.append(entry)

        self._quota_fallback_used = False
        quota = DirectionCounts.quota_for(target_count)
        report = PlacementReport(target_count=target_count)
        placed_words = set()
        queue: Deque[WordEntry] = deque(unique)
        progressed = False

        while len(report.placed) < target_count and report.total_attempts < self.policy.max_total_attempts:
            if self._is_cancelled():
                raise GenerationCancelled("Placement cancelled by a newer game")
            if not queue:
                queue = deque(e for e in unique if e.word not in placed_words)
                if not queue:
                    break
                if not progressed:
                    LOGGER.debug("Full pass placed nothing; treating budget as exhausted")
                    report.total_attempts = self.policy.max_total_attempts
                    break
                progressed = False

            entry = queue.popleft()
            placed = self.try_place(grid, entry, quota)
            if placed is None:
                report.total_attempts += 1
                LOGGER.debug("Could not place %s (%s failures)", entry.word, report.total_attempts)
                continue
            report.placed.append(placed)
            placed_words.add(entry.word)
            self.session.used_words.add(entry.word)
            progressed = True

        report.unplaced = [e.word for e in unique if e.word not in placed_words]
        report.quota_fallback_used = self._quota_fallback_used
        return report
