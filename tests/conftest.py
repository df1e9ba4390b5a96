from __future__ import annotations

import pytest

from falling_blocks.game import GameConfig, GameSession, TextDisplay


@pytest.fixture
def display() -> TextDisplay:
    return TextDisplay(27, 15)


@pytest.fixture
def session(display: TextDisplay) -> GameSession:
    return GameSession(GameConfig(random_seed=7), display=display)

