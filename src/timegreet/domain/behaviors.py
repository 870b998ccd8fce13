"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

GOOD_MORNING: Final[str] = "Good morning"
GOOD_AFTERNOON: Final[str] = "Good afternoon"
GOOD_EVENING: Final[str] = "Good evening"

#: Language assumed when no target language is configured.
DEFAULT_LANGUAGE: Final[str] = "EN"

#: Separator placed between the time greeting and the configured message.
GREETING_SEPARATOR: Final[str] = "! "

_AFTERNOON_STARTS: Final[int] = 12
_EVENING_STARTS: Final[int] = 18


def select_time_greeting(hour: int) -> str:
    """Return the English greeting phrase for a local hour of day.

    Buckets are half-open: ``[0, 12)`` is morning, ``[12, 18)`` is
    afternoon and ``[18, 24)`` is evening.

    Args:
        hour: Local wall-clock hour, 0 through 23.

    Returns:
        One of :data:`GOOD_MORNING`, :data:`GOOD_AFTERNOON`, :data:`GOOD_EVENING`.

    Raises:
        ValueError: If ``hour`` lies outside 0..23.

    Examples:
        >>> select_time_greeting(9)
        'Good morning'
        >>> select_time_greeting(12)
        'Good afternoon'
        >>> select_time_greeting(18)
        'Good evening'
        >>> select_time_greeting(24)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: hour must be between 0 and 23, got 24
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be between 0 and 23, got {hour}")
    if hour < _AFTERNOON_STARTS:
        return GOOD_MORNING
    if hour < _EVENING_STARTS:
        return GOOD_AFTERNOON
    return GOOD_EVENING


def combine_greeting(time_greeting: str, message: str) -> str:
    """Join a time greeting and the configured message.

    Examples:
        >>> combine_greeting("Guten Morgen", "Welcome!")
        'Guten Morgen! Welcome!'
    """
    return f"{time_greeting}{GREETING_SEPARATOR}{message}"


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, empty, or whitespace-only strings.

    Examples:
        >>> is_blank("   ")
        True
        >>> is_blank("DE")
        False
    """
    return value is None or not value.strip()


def normalize_language(code: str) -> str:
    """Upper-case a language code the way translation providers expect it.

    Examples:
        >>> normalize_language(" de ")
        'DE'
        >>> normalize_language("en-gb")
        'EN-GB'
    """
    return code.strip().upper()


__all__ = [
    "DEFAULT_LANGUAGE",
    "GOOD_AFTERNOON",
    "GOOD_EVENING",
    "GOOD_MORNING",
    "GREETING_SEPARATOR",
    "combine_greeting",
    "is_blank",
    "normalize_language",
    "select_time_greeting",
]
