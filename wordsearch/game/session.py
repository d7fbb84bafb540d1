"""Game session orchestration: puzzle lifecycle, timer and progression."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Set

from ..core.constants import DIFFICULTY_CONFIGS, Difficulty, DifficultyConfig
from ..core.exceptions import GenerationCancelled, GenerationError
from ..core.models import Cell, GameSummary
from ..data.word_source import StaticWordSource, WordSource
from ..engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from ..utils.logger import get_logger
from .matcher import MatchOutcome, MatchResolver, MatchStatus
from .selection import SelectionTracker


LOGGER = get_logger(__name__)

WINS_PER_TIER = 3

SummaryListener = Callable[[GameSummary], None]


class PuzzleStatus(str, Enum):
    BUILDING = "building"
    READY = "ready"
    SELECTING = "selecting"
    SOLVED = "solved"
    FAILED = "failed"


@dataclass
class PuzzleView:
    """Read-only state consumed by a rendering layer."""

    grid: List[Cell]
    selection: List[int]
    found_words: Set[str]
    status: PuzzleStatus
    words: List[str] = field(default_factory=list)
    highlights: Dict[int, str] = field(default_factory=dict)
    remaining_seconds: int = 0
    failure_reason: Optional[str] = None
    difficulty: Difficulty = Difficulty.EASY
    level: int = 1


class GameSession:
    """Owns one puzzle at a time and routes player input into it."""

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        word_source: Optional[WordSource] = None,
        config: Optional[GeneratorConfig] = None,
        restart_on_timeout: bool = True,
    ) -> None:
        self.config = config or GeneratorConfig(difficulty=difficulty)
        self.difficulty = Difficulty(difficulty)
        self.word_source = word_source or StaticWordSource(seed=self.config.seed)
        self.restart_on_timeout = restart_on_timeout
        self.rng = random.Random(self.config.seed)
        self.used_words: Set[str] = set()
        self.status = PuzzleStatus.BUILDING
        self.failure_reason: Optional[str] = None
        self.feedback = ""
        self.level = 1
        self.consecutive_wins = 0
        self.remaining_seconds = 0
        self.elapsed_seconds = 0
        self.puzzle: Optional[PuzzleResult] = None
        self.tracker: Optional[SelectionTracker] = None
        self.resolver: Optional[MatchResolver] = None
        self._generation = 0
        self._listeners: List[SummaryListener] = []

    @property
    def difficulty_config(self) -> DifficultyConfig:
        return DIFFICULTY_CONFIGS[self.difficulty]

    def add_summary_listener(self, listener: SummaryListener) -> None:
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Puzzle lifecycle
    # ------------------------------------------------------------------
    def cancel(self) -> None:
        """Invalidate any in-flight build for this session."""

        self._generation += 1

    def new_game(self) -> PuzzleStatus:
        self.cancel()
        token = self._generation
        self._reset_puzzle()

        seed = self.rng.randint(0, 1_000_000) if self.config.seed is not None else None
        generator = PuzzleGenerator(
            replace(self.config, difficulty=self.difficulty, seed=seed),
            word_source=self.word_source,
        )
        try:
            puzzle = generator.generate(
                self.used_words, is_cancelled=lambda: token != self._generation
            )
        except GenerationCancelled:
            LOGGER.info("Discarding superseded build %s", token)
            return self.status
        except GenerationError as exc:
            if token != self._generation:
                return self.status
            LOGGER.error("Puzzle generation failed: %s", exc)
            self.status = PuzzleStatus.FAILED
            self.failure_reason = "generation"
            self.feedback = "Failed to load puzzle after multiple attempts. Please try again."
            return self.status

        if token != self._generation:
            LOGGER.info("Discarding superseded build %s", token)
            return self.status
        self._install(puzzle)
        return self.status

    def set_difficulty(self, difficulty: Difficulty) -> PuzzleStatus:
        self.difficulty = Difficulty(difficulty)
        self.consecutive_wins = 0
        return self.new_game()

    def _reset_puzzle(self) -> None:
        self.status = PuzzleStatus.BUILDING
        self.failure_reason = None
        self.feedback = ""
        self.puzzle = None
        self.tracker = None
        self.resolver = None
        self.remaining_seconds = 0
        self.elapsed_seconds = 0

    def _install(self, puzzle: PuzzleResult) -> None:
        self.puzzle = puzzle
        self.tracker = SelectionTracker(puzzle.grid.bounds)
        self.resolver = MatchResolver(
            puzzle.grid, puzzle.word_list, puzzle.difficulty_config.min_word_length
        )
        self.remaining_seconds = puzzle.difficulty_config.time_limit_seconds
        self.status = PuzzleStatus.READY
        self.feedback = f"Find {len(puzzle.words)} hidden words!"

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def down(self, index: int) -> List[int]:
        if self.status is not PuzzleStatus.READY or self.tracker is None:
            return []
        selection = self.tracker.down(index)
        if self.tracker.active:
            self.status = PuzzleStatus.SELECTING
        return selection

    def move(self, index: int) -> List[int]:
        if self.status is not PuzzleStatus.SELECTING or self.tracker is None:
            return []
        return self.tracker.move(index)

    def up(self) -> Optional[MatchOutcome]:
        if self.status is not PuzzleStatus.SELECTING or self.tracker is None or self.resolver is None:
            return None
        outcome = self.resolver.resolve(self.tracker.up())
        self.status = PuzzleStatus.READY
        self.feedback = outcome.message
        if outcome.status is MatchStatus.SOLVED:
            self._handle_win()
        return outcome

    def hint(self) -> Optional[str]:
        if self.resolver is None:
            return None
        remaining = self.resolver.outstanding
        if not remaining:
            self.feedback = "You found all words!"
            return None
        prefix = self.rng.choice(remaining)[:2]
        self.feedback = f"Try looking for a word starting with {prefix}..."
        return prefix

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------
    def tick(self) -> int:
        """Advance the countdown by one second while the puzzle is live."""

        if self.status not in (PuzzleStatus.READY, PuzzleStatus.SELECTING):
            return self.remaining_seconds
        self.remaining_seconds -= 1
        self.elapsed_seconds += 1
        if self.remaining_seconds <= 0:
            self.handle_timeout()
        return self.remaining_seconds

    def handle_timeout(self) -> None:
        LOGGER.info("Round timed out at level %s", self.level)
        if self.tracker is not None:
            self.tracker.clear()
        self.status = PuzzleStatus.FAILED
        self.failure_reason = "timeout"
        self.remaining_seconds = 0
        self.feedback = "Time's up!"
        self._emit_summary(solved=False)
        if self.restart_on_timeout:
            self.new_game()

    # ------------------------------------------------------------------
    # Progression
    # ------------------------------------------------------------------
    def _handle_win(self) -> None:
        self.status = PuzzleStatus.SOLVED
        self._emit_summary(solved=True)
        self.level += 1
        self.consecutive_wins += 1

        if self.consecutive_wins < WINS_PER_TIER:
            self.feedback = f"Level {self.level} unlocked!"
        elif self.difficulty is Difficulty.HARD:
            self.feedback = "Mastered Hard level! Continuing at max difficulty."
        else:
            self.difficulty = self.difficulty.next_tier()
            self.consecutive_wins = 0
            self.feedback = f"Advanced to {self.difficulty.value.title()} level!"
        LOGGER.info("Puzzle solved; %s", self.feedback)

    def _emit_summary(self, solved: bool) -> None:
        summary = GameSummary(
            words_found=len(self.resolver.found) if self.resolver else 0,
            total_words=len(self.puzzle.words) if self.puzzle else 0,
            elapsed_seconds=self.elapsed_seconds,
            solved=solved,
        )
        for listener in self._listeners:
            listener(summary)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def snapshot(self) -> PuzzleView:
        puzzle = self.puzzle
        return PuzzleView(
            grid=list(puzzle.grid.cells) if puzzle else [],
            selection=list(self.tracker.selection) if self.tracker else [],
            found_words=self.resolver.found_words if self.resolver else set(),
            status=self.status,
            words=puzzle.word_list if puzzle else [],
            highlights=self.resolver.cell_colors() if self.resolver else {},
            remaining_seconds=self.remaining_seconds,
            failure_reason=self.failure_reason,
            difficulty=self.difficulty,
            level=self.level,
        )
