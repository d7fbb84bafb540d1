"""CLI entrypoint for the word search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.constants import (MAX_PLACEMENT_ATTEMPTS, MAX_RETRIES, MAX_TOTAL_ATTEMPTS,
                                       Difficulty)
from wordsearch.core.exceptions import GenerationError
from wordsearch.data.word_source import FallbackWordSource, StaticWordSource, UserWordListSource
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import print_puzzle_stats

LOGGER = get_logger("wordsearch.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search puzzles",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="Difficulty tier (grid size, word lengths, word count)",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit candidate words",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Pull words from the hosted dictionary (WORDSEARCH_DICTIONARY_URL), "
        "falling back to the built-in list",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-placement-attempts",
        type=int,
        default=MAX_PLACEMENT_ATTEMPTS,
        help="Random starts tried per word and direction (doubled for long words)",
    )
    parser.add_argument(
        "--max-total-attempts",
        type=int,
        default=MAX_TOTAL_ATTEMPTS,
        help="Failed word placements allowed per grid build",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=MAX_RETRIES,
        help="Grid builds attempted before giving up",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and stats instead of JSON",
    )
    parser.add_argument(
        "--show-solution",
        action="store_true",
        help="Lowercase placed-word letters in --pretty output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_word_source(args: argparse.Namespace):
    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    if user_words:
        return UserWordListSource(user_words, seed=args.seed)
    if args.remote:
        from wordsearch.io.dictionary_client import RestDictionarySource

        try:
            remote = RestDictionarySource(seed=args.seed)
        except RuntimeError as exc:
            LOGGER.warning("Hosted dictionary unavailable (%s); using built-in words", exc)
            return StaticWordSource(seed=args.seed)
        return FallbackWordSource(remote, [StaticWordSource(seed=args.seed)])
    return StaticWordSource(seed=args.seed)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.show_solution and not args.pretty:
        parser.error("--show-solution requires --pretty")
    if args.max_retries < 1:
        parser.error("--max-retries must be at least 1")

    config = GeneratorConfig(
        difficulty=Difficulty(args.difficulty),
        max_placement_attempts=args.max_placement_attempts,
        max_total_attempts=args.max_total_attempts,
        max_retries=args.max_retries,
        seed=args.seed,
    )
    generator = PuzzleGenerator(config, word_source=build_word_source(args))
    try:
        result = generator.generate()
    except GenerationError as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1

    if args.pretty:
        print_puzzle_stats(result, show_solution=args.show_solution)
        return 0

    payload: Dict[str, Any] = {
        "difficulty": config.difficulty.value,
        "rows": result.grid.rows,
        "cols": result.grid.cols,
        "grid": result.grid.to_rows(),
        "words": [
            {
                "word": placed.word,
                "start": [placed.start_row, placed.start_col],
                "direction": placed.direction.name.lower(),
                "cells": placed.cells,
            }
            for placed in result.words
        ],
        "retry_count": result.retry_count,
        "seed": result.seed,
    }

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
