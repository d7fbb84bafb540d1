"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult
    from ..engine.grid import WordSearchGrid


def format_grid(grid: WordSearchGrid, highlight: Optional[Iterable[int]] = None) -> str:
    marked = set(highlight or ())
    width = grid.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.rows):
        symbols = []
        for c in range(width):
            index = grid.bounds.to_index(r, c)
            letter = grid.letter_at(index) or "."
            symbols.append(letter.lower() if index in marked else letter)
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_puzzle_stats(result: PuzzleResult, *, show_solution: bool = False, stream=None) -> None:
    """Print grid, word list and placement stats for a generated puzzle."""

    stream = stream or sys.stdout
    grid = result.grid
    solution = [index for placed in result.words for index in placed.cells] if show_solution else None
    print(format_grid(grid, highlight=solution), file=stream)

    total_cells = len(grid)
    owned = sum(1 for cell in grid.cells if cell.owner_word is not None)
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.rows} x {grid.cols} ({total_cells} cells)", file=stream)
    print(f"  Word letters:  {owned} ({owned / total_cells * 100:.0f}%)", file=stream)
    print(f"  Filler:        {total_cells - owned}", file=stream)

    categories = Counter(placed.direction.category.value for placed in result.words)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.words)}", file=stream)
    print(f"  Retries:       {result.retry_count}", file=stream)
    mix = " ".join(f"{name}:{count}" for name, count in sorted(categories.items()))
    print(f"  Directions:    {mix}", file=stream)
    for placed in result.words:
        print(
            f"  {placed.word:<10} ({placed.start_row},{placed.start_col}) {placed.direction.name}",
            file=stream,
        )

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
