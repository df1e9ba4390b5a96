from __future__ import annotations

import logging
from typing import Optional

from .core import GameSession


logger = logging.getLogger(__name__)


class FrameDriver:
    """Feeds elapsed time into a session one frame at a time.

    The driver owns at most one pending frame. Each frame reschedules the
    next one only while the session is running, so reaching game over stops
    the loop. `restart` bumps the generation counter, which turns any frame
    requested before the restart into a no-op.
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.generation = 0
        self.pending: Optional[int] = None
        self.last_time: Optional[float] = None
        self.frames = 0

    @property
    def scheduled(self) -> bool:
        return self.pending is not None

    def start(self, now: float) -> int:
        """Schedule the first frame; its elapsed time is measured from `now`."""
        self.last_time = now
        self.pending = self.generation
        return self.generation

    def frame(self, now: float, generation: Optional[int] = None) -> bool:
        """Run the pending frame. Returns False for stale or unscheduled frames."""
        if generation is None:
            generation = self.generation
        if self.pending is None or generation != self.pending:
            return False
        self.pending = None
        last = now if self.last_time is None else self.last_time
        self.last_time = now
        self.session.tick(now - last)
        self.frames += 1
        if self.session.running:
            self.pending = self.generation
        else:
            logger.debug("Frame loop stopped after %d frames", self.frames)
        return True

    def cancel(self) -> None:
        self.generation += 1
        self.pending = None

    def restart(self, now: float) -> int:
        self.cancel()
        self.session.reset()
        self.frames = 0
        return self.start(now)
