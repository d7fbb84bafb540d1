"""Pointer-drag tracking that resolves to straight-line cell runs."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import Bounds


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class SelectionTracker:
    """Turns ``down``/``move``/``up`` events into a run of cell indices.

    Every accepted move rebuilds the run from the anchor, so bursts of
    out-of-order move events cannot make the selection drift.
    """

    def __init__(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self.anchor: Optional[int] = None
        self.selection: List[int] = []

    @property
    def active(self) -> bool:
        return self.anchor is not None

    def down(self, index: int) -> List[int]:
        if not 0 <= index < self.bounds.size:
            return self.selection
        self.anchor = index
        self.selection = [index]
        return self.selection

    def move(self, index: int) -> List[int]:
        if self.anchor is None or not 0 <= index < self.bounds.size:
            return self.selection
        start_row, start_col = self.bounds.to_coords(self.anchor)
        row, col = self.bounds.to_coords(index)
        row_diff = row - start_row
        col_diff = col - start_col

        straight = (
            row_diff == 0
            or col_diff == 0
            or abs(row_diff) == abs(col_diff)
        )
        if not straight:
            return self.selection

        row_step, col_step = _sign(row_diff), _sign(col_diff)
        steps = max(abs(row_diff), abs(col_diff))
        path = [self.anchor]
        for offset in range(1, steps + 1):
            r = start_row + offset * row_step
            c = start_col + offset * col_step
            if not self.bounds.contains(r, c):
                break
            cell_index = self.bounds.to_index(r, c)
            if cell_index not in path:
                path.append(cell_index)
        self.selection = path
        return self.selection

    def up(self) -> List[int]:
        """Return the finalized selection and clear tracker state."""

        finalized = list(self.selection)
        self.clear()
        return finalized

    def clear(self) -> None:
        self.anchor = None
        self.selection = []
