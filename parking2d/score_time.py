"""Score keeping and the per-level countdown."""

from __future__ import annotations

import time
from typing import Callable


class ScoreTimeManager:
    """Tracks the score, the current level and the time left on it."""

    BASE_SCORE_PER_LEVEL = 1000
    TIME_BONUS = 10
    DEFAULT_TIME_LIMIT = 300.0

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._score = 0
        self._level = 1
        self._time_limit = self.DEFAULT_TIME_LIMIT
        self._time_remaining = self.DEFAULT_TIME_LIMIT
        self._level_active = False
        self._level_started = clock()

    @property
    def current_score(self) -> int:
        return self._score

    @property
    def current_level(self) -> int:
        return self._level

    @property
    def time_remaining(self) -> float:
        return self._time_remaining

    @property
    def level_active(self) -> bool:
        return self._level_active

    def start_level(self, level_number: int, time_limit: float = DEFAULT_TIME_LIMIT) -> None:
        """Begin a level with a fresh countdown."""
        self._level = level_number
        self._time_limit = time_limit
        self._time_remaining = time_limit
        self._level_active = True
        self._level_started = self._clock()

    def complete_level(self) -> None:
        """Finish the active level, awarding the level score plus a time bonus."""
        if not self._level_active:
            return
        self._level_active = False
        self.add_score(self.BASE_SCORE_PER_LEVEL + int(self._time_remaining * self.TIME_BONUS))

    def reset_level(self) -> None:
        """Restart the countdown of the current level."""
        self._time_remaining = self._time_limit
        self._level_active = True
        self._level_started = self._clock()

    def update(self) -> None:
        """Recompute the time left from the clock."""
        if not self._level_active:
            return
        elapsed = self._clock() - self._level_started
        self._time_remaining = max(0.0, self._time_limit - elapsed)

    def add_score(self, points: int) -> None:
        self._score += points

    def reset_score(self) -> None:
        self._score = 0

    def is_time_up(self) -> bool:
        return self._time_remaining <= 0.0 and self._level_active

    def time_remaining_string(self) -> str:
        """Return the time left as MM:SS."""
        total = int(self._time_remaining)
        minutes = int(total / 60)
        seconds = total - minutes * 60
        return f"{minutes:02d}:{seconds:02d}"

    def score_string(self) -> str:
        return f"Score: {self._score}"

    def level_string(self) -> str:
        return f"Level: {self._level}"

    def ui_string(self) -> str:
        return f"{self.score_string()}    Time: {self.time_remaining_string()}    {self.level_string()}"