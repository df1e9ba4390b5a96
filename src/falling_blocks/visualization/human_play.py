from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import pygame

from falling_blocks.game import FrameDriver, GameConfig, GameSession
from .renderer import PygameDisplay


logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Callable[[GameSession], bool]] = {
    pygame.K_LEFT: lambda game: game.move(-1, 0),
    pygame.K_RIGHT: lambda game: game.move(1, 0),
    pygame.K_DOWN: lambda game: game.move(0, 1),
    pygame.K_UP: lambda game: game.rotate(),
}


def run(config: Optional[GameConfig] = None, cell_size: int = 28, fps: int = 60) -> None:
    config = config or GameConfig()
    pygame.init()
    try:
        clock = pygame.time.Clock()
        display = PygameDisplay(config.rows, config.cols, cell_size=cell_size)
        screen = pygame.display.set_mode(display.window_size)
        pygame.display.set_caption("Falling Blocks")

        game = GameSession(config, display=display)
        driver = FrameDriver(game)
        driver.start(pygame.time.get_ticks())
        logger.info("Window opened at %dx%d", *display.window_size)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        driver.restart(pygame.time.get_ticks())
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            action(game)

            if driver.scheduled:
                driver.frame(pygame.time.get_ticks())

            display.present(screen)
            clock.tick(fps)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
