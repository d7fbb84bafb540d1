"""Main word search generator orchestration.

A build pulls candidate words, places them on a fresh grid and fills the
remaining cells. When placement exhausts its global attempt budget the build
restarts with one fewer word, up to ``max_retries`` times, inside a single
bounded loop.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from ..core.constants import (DIFFICULTY_CONFIGS, MAX_PLACEMENT_ATTEMPTS, MAX_RETRIES,
                              MAX_TOTAL_ATTEMPTS, Difficulty, DifficultyConfig)
from ..core.exceptions import GenerationCancelled, GenerationError, WordSourceError
from ..core.models import DirectionCounts, PlacedWord, PuzzleBuildSession, WordEntry
from ..data.word_source import StaticWordSource, WordRequest, WordSource
from ..utils.logger import get_logger
from .grid import WordSearchGrid
from .placement import PlacementEngine, PlacementPolicy
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    difficulty: Difficulty = Difficulty.EASY
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    max_total_attempts: int = MAX_TOTAL_ATTEMPTS
    max_retries: int = MAX_RETRIES
    attempt_ceiling_factor: int = 4
    seed: Optional[int] = None

    @property
    def difficulty_config(self) -> DifficultyConfig:
        return DIFFICULTY_CONFIGS[Difficulty(self.difficulty)]

    def to_placement_policy(self) -> PlacementPolicy:
        return PlacementPolicy(
            max_placement_attempts=self.max_placement_attempts,
            max_total_attempts=self.max_total_attempts,
            attempt_ceiling_factor=self.attempt_ceiling_factor,
        )


@dataclass
class PuzzleResult:
    grid: WordSearchGrid
    words: List[PlacedWord]
    difficulty_config: DifficultyConfig
    retry_count: int = 0
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def word_list(self) -> List[str]:
        return [placed.word for placed in self.words]


class PuzzleGenerator:
    """High-level orchestrator: word pull, placement, fill, validation."""

    def __init__(
        self,
        config: GeneratorConfig,
        word_source: Optional[WordSource] = None,
        difficulty_config: Optional[DifficultyConfig] = None,
    ) -> None:
        self.config = config
        self.difficulty_config = difficulty_config or config.difficulty_config
        self.word_source = word_source or StaticWordSource(seed=config.seed)
        self.policy = config.to_placement_policy()
        self.validator = GridValidator()
        self.rng = random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        used_words: Optional[Set[str]] = None,
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> PuzzleResult:
        """Build a puzzle or raise :class:`GenerationError` after ``max_retries``.

        ``used_words`` is updated in place with every placed word so callers
        can keep it across puzzles.
        """

        cancelled = is_cancelled or (lambda: False)
        session = PuzzleBuildSession(
            used_words=used_words if used_words is not None else set(),
            rng=self.rng,
        )
        word_count = self.difficulty_config.word_count

        for attempt in range(1, self.config.max_retries + 1):
            if cancelled():
                raise GenerationCancelled("Generation superseded before attempt")
            LOGGER.info(
                "Generation attempt %s/%s targeting %s words",
                attempt,
                self.config.max_retries,
                word_count,
            )
            result = self._build_once(session, word_count, cancelled)
            if result is not None:
                LOGGER.info("Word search generation completed with %s words", len(result.words))
                return result
            session.retry_count += 1
            if session.retry_count < self.config.max_retries:
                word_count = max(1, word_count - 1)
                LOGGER.warning("Placement budget exhausted; retrying with %s words", word_count)

        LOGGER.error(
            "Unable to generate word search after %s retries", self.config.max_retries
        )
        raise GenerationError(
            f"Unable to generate word search after {self.config.max_retries} retries",
            retry_count=session.retry_count,
            word_count=word_count,
        )

    # ------------------------------------------------------------------
    # Single build
    # ------------------------------------------------------------------
    def _build_once(
        self,
        session: PuzzleBuildSession,
        word_count: int,
        cancelled: Callable[[], bool],
    ) -> Optional[PuzzleResult]:
        entries = self._pull_words(session, word_count)
        if not entries:
            LOGGER.warning("Word source returned no words")
            return None
        # Short supply shrinks the target instead of failing outright.
        target = min(word_count, len(entries))
        entries.sort(key=len, reverse=True)

        grid = WordSearchGrid(self.difficulty_config.grid_rows, self.difficulty_config.grid_cols)
        session.direction_counts = DirectionCounts()
        engine = PlacementEngine(self.policy, session, is_cancelled=cancelled)
        report = engine.place_all(grid, entries, target)
        if not report.complete:
            LOGGER.info(
                "Placed %s/%s words after %s failed attempts",
                len(report.placed),
                target,
                report.total_attempts,
            )
            return None

        grid.fill_empty_cells(session.rng)
        validation = self.validator.validate(grid, report.placed)
        if not validation.ok:
            LOGGER.warning("Generated grid failed validation: %s", validation.messages)
            return None
        return PuzzleResult(
            grid=grid,
            words=report.placed,
            difficulty_config=self.difficulty_config,
            retry_count=session.retry_count,
            validation_messages=validation.messages,
            seed=self.config.seed,
        )

    def _pull_words(self, session: PuzzleBuildSession, word_count: int) -> List[WordEntry]:
        entries = self._fetch(word_count, session.used_words)
        if not entries and session.used_words:
            # Every candidate has been used; forget the history for this pull.
            LOGGER.warning(
                "Word source exhausted by %s used words; allowing repeats",
                len(session.used_words),
            )
            session.used_words.clear()
            entries = self._fetch(word_count, session.used_words)
        return entries

    def _fetch(self, word_count: int, used_words: Set[str]) -> List[WordEntry]:
        try:
            return list(self.word_source.fetch(self._request(word_count, used_words)))
        except WordSourceError as exc:
            LOGGER.warning("Word source failed: %s", exc)
            return []

    def _request(self, word_count: int, used_words: Set[str]) -> WordRequest:
        return WordRequest(
            min_length=self.difficulty_config.min_word_length,
            max_length=self.difficulty_config.max_word_length,
            desired_count=word_count,
            exclude_words=frozenset(used_words),
        )
