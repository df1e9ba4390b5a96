from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks.game.pieces import PALETTE


BACKGROUND = (10, 10, 14)
BOARD_FILL = (20, 20, 26)
OUTLINE = (0, 0, 0)
TEXT = (230, 230, 230)


def color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return BOARD_FILL
    c = pygame.Color(PALETTE[(abs(v) - 1) % len(PALETTE)])
    return (c.r, c.g, c.b)


class PygameDisplay:
    """Board surface plus a HUD panel to its right.

    Block size is the board surface width divided by the column count.
    """

    def __init__(self, rows: int, cols: int, cell_size: int = 28, margin: int = 20,
                 panel_width: int = 180) -> None:
        self.rows = rows
        self.cols = cols
        self.margin = margin
        self.panel_width = panel_width
        self.board = pygame.Surface((cols * cell_size, rows * cell_size))
        self.block = self.board.get_width() // cols
        self.score = 0
        self.level = 1
        self.final_score: Optional[int] = None
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    @property
    def window_size(self) -> Tuple[int, int]:
        w = self.margin * 3 + self.board.get_width() + self.panel_width
        h = self.margin * 2 + self.board.get_height()
        return w, h

    # Render surface
    def clear(self) -> None:
        self.board.fill(BOARD_FILL)

    def draw_block(self, col: int, row: int, color_id: int) -> None:
        rect = pygame.Rect(col * self.block, row * self.block, self.block, self.block)
        pygame.draw.rect(self.board, color_for_value(color_id), rect)
        pygame.draw.rect(self.board, OUTLINE, rect, 1)

    # HUD
    def set_score(self, score: int) -> None:
        self.score = score

    def set_level(self, level: int) -> None:
        self.level = level

    def show_game_over(self, final_score: int) -> None:
        self.final_score = final_score

    def hide_game_over(self) -> None:
        self.final_score = None

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            self._font = pygame.font.SysFont(None, 26)
            self._big_font = pygame.font.SysFont(None, 44)
        return self._font, self._big_font

    def present(self, screen: pygame.Surface) -> None:
        font, big_font = self._fonts()
        screen.fill(BACKGROUND)
        screen.blit(self.board, (self.margin, self.margin))

        x_text = self.margin * 2 + self.board.get_width()
        info_lines = [
            f"Score: {self.score}",
            f"Level: {self.level}",
            "",
            "Move: Left/Right",
            "Drop: Down",
            "Rotate: Up",
            "Restart: R",
        ]
        for i, txt in enumerate(info_lines):
            img = font.render(txt, True, TEXT)
            screen.blit(img, (x_text, self.margin + i * 24))

        if self.final_score is not None:
            w, h = self.board.get_size()
            veil = pygame.Surface((w, h), pygame.SRCALPHA)
            veil.fill((0, 0, 0, 180))
            screen.blit(veil, (self.margin, self.margin))
            center_x = self.margin + w // 2
            center_y = self.margin + h // 2
            for text, dy, f in (
                ("Game Over", -30, big_font),
                (f"Final score: {self.final_score}", 10, font),
                ("Press R to restart", 40, font),
            ):
                img = f.render(text, True, (255, 255, 255))
                screen.blit(img, img.get_rect(center=(center_x, center_y + dy)))
        pygame.display.flip()
