"""Fixed-window rate limiter for sale submissions.

Keeps its state per key in memory. The clock is injectable so tests can
advance time without sleeping.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from starjet.domain.model.limits import MIN_SUBMISSION_INTERVAL


@dataclass
class _Window:
    started_at: float
    attempts: int


class FixedWindowRateLimiter:
    """Allow at most *max_attempts* per key in each *window_seconds* window."""

    def __init__(
        self,
        max_attempts: int = 1,
        window_seconds: float = MIN_SUBMISSION_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self._max = max_attempts
        self._window = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    @property
    def window_seconds(self) -> float:
        return self._window

    def allow(self, key: str = "default") -> bool:
        """Record an attempt for *key*; False if the window is already full."""
        now = self._clock()
        window = self._windows.get(key)
        if window is None or now - window.started_at >= self._window:
            self._prune(now)
            self._windows[key] = _Window(started_at=now, attempts=1)
            return True
        if window.attempts >= self._max:
            return False
        window.attempts += 1
        return True

    def reset(self, key: str = "default") -> None:
        self._windows.pop(key, None)

    @property
    def tracked_keys(self) -> int:
        return len(self._windows)

    def _prune(self, now: float) -> None:
        expired = [
            key for key, window in self._windows.items()
            if now - window.started_at >= self._window
        ]
        for key in expired:
            del self._windows[key]
