from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np


class ShapeKind(IntEnum):
    LINE = 0
    SQUARE = 1
    T = 2
    Z = 3
    S = 4


Shape = np.ndarray


SHAPES = {
    ShapeKind.LINE: np.array([[1, 1, 1, 1]], dtype=np.int8),
    ShapeKind.SQUARE: np.array([[1, 1], [1, 1]], dtype=np.int8),
    ShapeKind.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    ShapeKind.Z: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    ShapeKind.S: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
}
for _template in SHAPES.values():
    _template.flags.writeable = False

# Color id k (1-based) maps to PALETTE[k - 1]
PALETTE: Tuple[str, ...] = (
    "#FF5733",
    "#33FF57",
    "#3357FF",
    "#FFFF33",
    "#FF33FF",
    "#33FFFF",
    "#FFFFFF",
)


def rotate_cw(shape: Shape) -> Shape:
    """Rotate a shape matrix 90 degrees clockwise; dimensions swap."""
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass
class ActivePiece:
    shape: Shape
    x: int
    y: int
    color: int

    def cells_at(self, dx: int = 0, dy: int = 0, shape: Optional[Shape] = None) -> List[Tuple[int, int]]:
        """Absolute board coordinates of every occupied cell after an offset."""
        s = self.shape if shape is None else shape
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for ly in range(h):
            for lx in range(w):
                if s[ly, lx]:
                    cells.append((self.x + lx + dx, self.y + ly + dy))
        return cells


class PieceFactory:
    """Spawns pieces with a uniformly random shape and an independent random color."""

    def __init__(self, cols: int, rng: Optional[random.Random] = None, spawn_y: int = 0) -> None:
        self.cols = cols
        self.spawn_y = spawn_y
        self.rng = rng or random.Random()

    def spawn(self) -> ActivePiece:
        kind = self.rng.choice(list(ShapeKind))
        color = self.rng.randint(1, len(PALETTE))
        return ActivePiece(shape=SHAPES[kind], x=self.cols // 2 - 2, y=self.spawn_y, color=color)
