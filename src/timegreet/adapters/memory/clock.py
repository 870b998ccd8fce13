"""Deterministic clock for testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FixedClock:
    """Always report the same local hour.

    Example:
        >>> clock = FixedClock(hour=9)
        >>> clock()
        9
        >>> clock.hour = 18
        >>> clock()
        18
    """

    hour: int = 9

    def __call__(self) -> int:
        return self.hour


__all__ = ["FixedClock"]
