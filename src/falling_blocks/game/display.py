"""Render surface and HUD collaborators driven by the game session."""

from __future__ import annotations

from typing import List, Optional, Protocol


class Display(Protocol):
    def clear(self) -> None: ...

    def draw_block(self, col: int, row: int, color_id: int) -> None: ...

    def set_score(self, score: int) -> None: ...

    def set_level(self, level: int) -> None: ...

    def show_game_over(self, final_score: int) -> None: ...

    def hide_game_over(self) -> None: ...


class NullDisplay:
    """Discards every call. Used when a session runs without a view."""

    def clear(self) -> None:
        pass

    def draw_block(self, col: int, row: int, color_id: int) -> None:
        pass

    def set_score(self, score: int) -> None:
        pass

    def set_level(self, level: int) -> None:
        pass

    def show_game_over(self, final_score: int) -> None:
        pass

    def hide_game_over(self) -> None:
        pass


class TextDisplay:
    """Headless display that keeps the last frame as rows of characters."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.frame: List[List[str]] = []
        self.score = 0
        self.level = 1
        self.final_score: Optional[int] = None
        self.frames_drawn = 0
        self.clear()

    def clear(self) -> None:
        self.frame = [["·"] * self.cols for _ in range(self.rows)]
        self.frames_drawn += 1

    def draw_block(self, col: int, row: int, color_id: int) -> None:
        if 0 <= row < self.rows and 0 <= col < self.cols:
            self.frame[row][col] = str(color_id)

    def set_score(self, score: int) -> None:
        self.score = score

    def set_level(self, level: int) -> None:
        self.level = level

    def show_game_over(self, final_score: int) -> None:
        self.final_score = final_score

    def hide_game_over(self) -> None:
        self.final_score = None

    @property
    def game_over_visible(self) -> bool:
        return self.final_score is not None

    def render(self) -> str:
        header = f"Score: {self.score}  Level: {self.level}"
        if self.final_score is not None:
            header += f"  GAME OVER (final score {self.final_score})"
        return "\n".join([header] + ["".join(r) for r in self.frame])
