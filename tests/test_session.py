import unittest
from unittest.mock import MagicMock

from wordsearch.core.constants import Difficulty
from wordsearch.core.models import WordEntry
from wordsearch.data.word_source import StaticWordSource
from wordsearch.engine.generator import GeneratorConfig
from wordsearch.game.matcher import MatchStatus
from wordsearch.game.session import GameSession, PuzzleStatus


def _session(**kwargs) -> GameSession:
    config = GeneratorConfig(difficulty=Difficulty.EASY, seed=21)
    return GameSession(
        difficulty=Difficulty.EASY,
        word_source=StaticWordSource(seed=21),
        config=config,
        **kwargs,
    )


def _solve(session: GameSession):
    outcome = None
    assert session.puzzle is not None
    for placed in session.puzzle.words:
        session.down(placed.cells[0])
        session.move(placed.cells[-1])
        outcome = session.up()
    return outcome


class GameSessionLifecycleTests(unittest.TestCase):
    def test_new_game_becomes_ready(self) -> None:
        session = _session()
        self.assertEqual(session.new_game(), PuzzleStatus.READY)
        view = session.snapshot()
        self.assertEqual(len(view.grid), 48)
        self.assertEqual(view.remaining_seconds, 240)
        self.assertEqual(view.found_words, set())
        self.assertEqual(session.feedback, f"Find {len(view.words)} hidden words!")

    def test_selection_round_trip_finds_word(self) -> None:
        session = _session()
        session.new_game()
        placed = session.puzzle.words[0]

        session.down(placed.cells[0])
        self.assertEqual(session.status, PuzzleStatus.SELECTING)
        self.assertEqual(session.move(placed.cells[-1]), placed.cells)
        outcome = session.up()

        self.assertTrue(outcome.matched)
        self.assertEqual(outcome.word, placed.word)
        self.assertIn(placed.word, session.snapshot().found_words)
        self.assertEqual(session.snapshot().selection, [])
        self.assertIn(session.status, (PuzzleStatus.READY, PuzzleStatus.SOLVED))

    def test_backward_drag_finds_word(self) -> None:
        session = _session()
        session.new_game()
        placed = session.puzzle.words[0]
        session.down(placed.cells[-1])
        session.move(placed.cells[0])
        outcome = session.up()
        self.assertEqual(outcome.word, placed.word)
        self.assertEqual(outcome.cells, placed.cells)

    def test_short_selection_clears_and_continues(self) -> None:
        session = _session()
        session.new_game()
        session.down(0)
        outcome = session.up()
        self.assertEqual(outcome.status, MatchStatus.TOO_SHORT)
        self.assertEqual(session.status, PuzzleStatus.READY)
        self.assertEqual(session.snapshot().found_words, set())

    def test_input_ignored_when_not_ready(self) -> None:
        session = _session()
        self.assertEqual(session.down(0), [])
        self.assertIsNone(session.up())

    def test_hint_names_outstanding_prefix(self) -> None:
        session = _session()
        session.new_game()
        hint = session.hint()
        self.assertIn(hint, {word[:2] for word in session.puzzle.word_list})


class GameSessionOutcomeTests(unittest.TestCase):
    def test_solving_emits_summary_and_levels_up(self) -> None:
        session = _session()
        listener = MagicMock()
        session.add_summary_listener(listener)
        session.new_game()
        total = len(session.puzzle.words)

        outcome = _solve(session)

        self.assertEqual(outcome.status, MatchStatus.SOLVED)
        self.assertEqual(session.status, PuzzleStatus.SOLVED)
        summary = listener.call_args.args[0]
        self.assertTrue(summary.solved)
        self.assertEqual(summary.words_found, total)
        self.assertEqual(summary.total_words, total)
        self.assertEqual(session.level, 2)
        self.assertEqual(session.consecutive_wins, 1)

    def test_three_wins_advance_difficulty(self) -> None:
        session = _session()
        for _ in range(3):
            session.new_game()
            _solve(session)
        self.assertEqual(session.difficulty, Difficulty.MEDIUM)
        self.assertEqual(session.consecutive_wins, 0)
        self.assertEqual(session.level, 4)

    def test_timeout_emits_summary_and_restarts(self) -> None:
        session = _session()
        listener = MagicMock()
        session.add_summary_listener(listener)
        session.new_game()
        first_puzzle = session.puzzle

        for _ in range(240):
            session.tick()

        summary = listener.call_args.args[0]
        self.assertFalse(summary.solved)
        self.assertEqual(summary.elapsed_seconds, 240)
        self.assertEqual(session.status, PuzzleStatus.READY)
        self.assertIsNot(session.puzzle, first_puzzle)
        self.assertEqual(session.remaining_seconds, 240)

    def test_timeout_without_restart_reports_failure(self) -> None:
        session = _session(restart_on_timeout=False)
        session.new_game()
        session.remaining_seconds = 1
        session.tick()
        self.assertEqual(session.status, PuzzleStatus.FAILED)
        self.assertEqual(session.failure_reason, "timeout")
        self.assertEqual(session.tick(), 0)

    def test_generation_failure_is_explicit(self) -> None:
        source = MagicMock()
        source.fetch.return_value = [WordEntry.from_word("ABCDEFGHIJKLMNOP")]
        session = GameSession(word_source=source, config=GeneratorConfig(seed=1))
        self.assertEqual(session.new_game(), PuzzleStatus.FAILED)
        self.assertEqual(session.failure_reason, "generation")
        self.assertEqual(session.snapshot().grid, [])

    def test_superseded_build_is_discarded(self) -> None:
        session = _session()
        source = MagicMock()

        def fetch(request):
            session.cancel()
            return [WordEntry.from_word("CAT")]

        source.fetch.side_effect = fetch
        session.word_source = source
        self.assertEqual(session.new_game(), PuzzleStatus.BUILDING)
        self.assertIsNone(session.puzzle)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
