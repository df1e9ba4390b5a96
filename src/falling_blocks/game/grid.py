from __future__ import annotations

import numpy as np


class OutOfBoundsError(IndexError):
    """Raised when a cell outside the grid is read or written."""


class GameGrid:
    """Fixed-size 2D grid of locked blocks.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values are 1-based indices into the color palette.
    Row 0 is the top of the board.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _check(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not self.is_inside(x, y):
            raise OutOfBoundsError(f"cell ({x}, {y}) outside {self.cols}x{self.rows} grid")

    def cell(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.grid[y, x])

    def set_cell(self, x: int, y: int, color_id: int) -> None:
        self._check(x, y)
        self.grid[y, x] = color_id

    def clear_full_rows(self) -> int:
        """Remove every full row, compact the rest downwards and return the count."""
        full = np.all(self.grid != 0, axis=1)
        num = int(full.sum())
        if num == 0:
            return 0
        # Remove full rows and add empty rows at the top
        kept = self.grid[~full]
        new_rows = np.zeros((num, self.cols), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


def format_grid(grid: np.ndarray) -> str:
    """Text picture of a grid: locked blocks as '█', falling cells as '▓'."""
    lines = []
    for row in grid:
        lines.append("".join("·" if cell == 0 else ("▓" if cell < 0 else "█") for cell in row))
    return "\n".join(lines)
