"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and row clearing
- ActivePiece, PieceFactory: Shape catalog, spawning and rotation
- ScoringRules, Progress: Score, level and drop-speed progression
- GameSession: Collision checks, locking and the timed loop state machine
- FrameDriver: Scheduler-agnostic frame loop around a session
"""

from .grid import GameGrid, OutOfBoundsError, format_grid
from .pieces import PALETTE, SHAPES, ActivePiece, PieceFactory, ShapeKind, rotate_cw
from .rules import Progress, ScoringRules
from .display import Display, NullDisplay, TextDisplay
from .core import GameConfig, GameSession, LockResult, LoopState, can_place
from .loop import FrameDriver

__all__ = [
    "GameGrid",
    "OutOfBoundsError",
    "format_grid",
    "PALETTE",
    "SHAPES",
    "ActivePiece",
    "PieceFactory",
    "ShapeKind",
    "rotate_cw",
    "Progress",
    "ScoringRules",
    "Display",
    "NullDisplay",
    "TextDisplay",
    "GameConfig",
    "GameSession",
    "LockResult",
    "LoopState",
    "can_place",
    "FrameDriver",
]
