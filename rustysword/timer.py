"""A countdown timer driven by elapsed time deltas."""

from __future__ import annotations

from datetime import timedelta


def _as_timedelta(value: timedelta | float) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


class Timer:
    """Counts down from ``duration``; ``ready`` turns True once it runs out."""

    def __init__(self, duration: timedelta | float) -> None:
        duration = _as_timedelta(duration)
        if duration < timedelta(0):
            raise ValueError("timer duration must not be negative")
        self.duration = duration
        self.time_left = duration
        self.ready = False

    @classmethod
    def from_millis(cls, ms: int) -> Timer:
        """Create a timer lasting ``ms`` milliseconds."""
        if ms < 0:
            raise ValueError("timer duration must not be negative")
        return cls(timedelta(milliseconds=ms))

    def reset(self) -> None:
        """Start the countdown over."""
        self.ready = False
        self.time_left = self.duration

    def update(self, delta: timedelta | float) -> None:
        """Advance the countdown by ``delta`` (a timedelta or seconds)."""
        if self.ready:
            return
        delta = _as_timedelta(delta)
        if delta > self.time_left:
            self.ready = True
        else:
            self.time_left -= delta