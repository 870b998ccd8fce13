"""Local wall-clock adapter."""

from __future__ import annotations

from datetime import datetime


def current_local_hour() -> int:
    """Return the current local hour (0-23).

    Example:
        >>> 0 <= current_local_hour() <= 23
        True
    """
    return datetime.now().hour


__all__ = ["current_local_hour"]
