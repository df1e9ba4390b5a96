from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .display import Display, NullDisplay
from .grid import GameGrid
from .pieces import ActivePiece, PieceFactory, Shape, rotate_cw
from .rules import Progress, ScoringRules


logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    rows: int = 27
    cols: int = 15
    random_seed: Optional[int] = None
    spawn_y: int = 0

    def __post_init__(self) -> None:
        # The widest template is four cells and spawns at cols // 2 - 2
        if self.cols < 4:
            raise ValueError(f"cols must be at least 4, got {self.cols}")
        if self.rows < 2:
            raise ValueError(f"rows must be at least 2, got {self.rows}")


@dataclass
class LockResult:
    rows_cleared: int
    game_over: bool


def can_place(grid: GameGrid, piece: ActivePiece, dx: int = 0, dy: int = 0,
              shape: Optional[Shape] = None) -> bool:
    """Check whether `piece` (or `shape` at its anchor) fits after moving by (dx, dy).

    Cells above the board (y < 0) are free space; the side walls and the
    floor are hard limits, and occupied cells block only once y >= 0.
    """
    for x, y in piece.cells_at(dx, dy, shape):
        if x < 0 or x >= grid.cols or y >= grid.rows:
            return False
        if y >= 0 and grid.cell(x, y) != 0:
            return False
    return True


class GameSession:
    """One single-player game: board, active piece, progress and loop state.

    All mutation happens through `move`, `rotate`, `tick` and `reset`, which
    are expected to be called from a single scheduling domain.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 display: Optional[Display] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.display: Display = display or NullDisplay()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.rows, self.config.cols)
        self.factory = PieceFactory(self.config.cols, self.rng, spawn_y=self.config.spawn_y)
        self.progress = Progress.start(self.rules)
        self.state = LoopState.RUNNING
        self.drop_counter = 0.0
        self.active: ActivePiece
        self.reset()

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is LoopState.GAME_OVER

    @property
    def score(self) -> int:
        return self.progress.score

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            # factory shares this generator
            self.rng.seed(seed)
        self.grid.reset()
        self.progress = Progress.start(self.rules)
        self.drop_counter = 0.0
        self.state = LoopState.RUNNING
        self.display.hide_game_over()
        self._update_hud()
        logger.info("New game on a %dx%d board", self.grid.rows, self.grid.cols)
        self._spawn()

    def can_place(self, dx: int = 0, dy: int = 0, shape: Optional[Shape] = None) -> bool:
        return can_place(self.grid, self.active, dx, dy, shape)

    def move(self, dx: int, dy: int) -> bool:
        """Translate the active piece; a blocked downward move locks it.

        Returns True only when the piece actually moved.
        """
        if not self.running:
            return False
        moved = False
        if self.can_place(dx, dy):
            self.active.x += dx
            self.active.y += dy
            moved = True
        elif dy > 0:
            self.lock()
        self.render()
        return moved

    def rotate(self) -> bool:
        if not self.running:
            return False
        candidate = rotate_cw(self.active.shape)
        if not self.can_place(0, 0, candidate):
            logger.debug("Rotation blocked at (%d, %d)", self.active.x, self.active.y)
            return False
        self.active.shape = candidate
        return True

    def lock(self) -> LockResult:
        """Commit the active piece into the grid, clear rows and spawn the next piece."""
        cells = self.active.cells_at()
        if any(y < 0 for _, y in cells):
            # Nothing is written when any cell would sit above the board
            self._end_game("piece locked above the board")
            return LockResult(rows_cleared=0, game_over=True)

        for x, y in cells:
            self.grid.set_cell(x, y, self.active.color)
        rows = self.grid.clear_full_rows()
        logger.debug("Locked piece at (%d, %d), %d row(s) cleared", self.active.x, self.active.y, rows)
        if self.progress.record_clear(rows, self.rules):
            logger.info("Level up: level %d, drop interval %d",
                        self.progress.level, self.progress.drop_interval)
        self._update_hud()

        if not self._spawn():
            return LockResult(rows_cleared=rows, game_over=True)
        return LockResult(rows_cleared=rows, game_over=False)

    def tick(self, delta: float) -> None:
        """Advance the loop by `delta` time units and redraw."""
        if not self.running:
            return
        self.drop_counter += delta
        if self.drop_counter > self.progress.drop_interval:
            self.move(0, 1)
            self.drop_counter = 0.0
        self.render()

    def render(self) -> None:
        self.display.clear()
        ys, xs = np.nonzero(self.grid.grid)
        for y, x in zip(ys.tolist(), xs.tolist()):
            self.display.draw_block(x, y, int(self.grid.grid[y, x]))
        for x, y in self.active.cells_at():
            if y >= 0:
                self.display.draw_block(x, y, self.active.color)

    def get_state(self) -> np.ndarray:
        # Overlay the active piece on a copy of the grid, negative for falling cells
        state = self.grid.clone_state()
        if self.running:
            for x, y in self.active.cells_at():
                if self.grid.is_inside(x, y):
                    state[y, x] = -self.active.color
        return state

    def _spawn(self) -> bool:
        self.active = self.factory.spawn()
        logger.debug("Spawned %dx%d piece at (%d, %d)", *self.active.shape.shape, self.active.x, self.active.y)
        if not self.can_place():
            self._end_game("no room to spawn")
            return False
        return True

    def _update_hud(self) -> None:
        self.display.set_score(self.progress.score)
        self.display.set_level(self.progress.level)

    def _end_game(self, reason: str) -> None:
        self.state = LoopState.GAME_OVER
        logger.info("Game over (%s), final score %d", reason, self.progress.score)
        self.display.show_game_over(self.progress.score)
