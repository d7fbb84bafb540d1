"""Word search puzzle generator and selection matcher.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: builds a puzzle with bounded retries.
- ``wordsearch.game.session.GameSession``: drives selection, matching, timer and progression.
- ``wordsearch.data.word_source`` adapters: interchangeable word providers.
"""

from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .game.session import GameSession, PuzzleStatus

__all__ = [
    "GameSession",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "PuzzleStatus",
]

__version__ = "0.1.0"
