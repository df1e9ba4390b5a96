from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    lines_per_level: int = 5
    initial_drop_interval: int = 1000
    drop_interval_step: int = 50
    min_drop_interval: int = 200

    def __post_init__(self) -> None:
        if self.min_drop_interval <= 0 or self.initial_drop_interval <= 0:
            raise ValueError("drop intervals must be positive")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_clear_points

    def next_interval(self, interval: int) -> int:
        return max(self.min_drop_interval, interval - self.drop_interval_step)


@dataclass
class Progress:
    """Score, level and gravity speed for one session."""

    score: int = 0
    level: int = 1
    lines_cleared: int = 0
    drop_interval: int = 1000

    @classmethod
    def start(cls, rules: ScoringRules) -> "Progress":
        return cls(drop_interval=rules.initial_drop_interval)

    def record_clear(self, rows: int, rules: ScoringRules) -> bool:
        """Apply a row-clear event; returns True when the level went up.

        The level threshold is checked once per call, so a multi-row clear
        raises the level by at most one.
        """
        if rows <= 0:
            return False
        self.score += rules.score_for_lines(rows)
        self.lines_cleared += rows
        if self.lines_cleared >= self.level * rules.lines_per_level:
            self.level += 1
            self.drop_interval = rules.next_interval(self.drop_interval)
            return True
        return False
