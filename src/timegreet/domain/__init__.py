"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Hour bucketing and greeting composition
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_LANGUAGE,
    GOOD_AFTERNOON,
    GOOD_EVENING,
    GOOD_MORNING,
    GREETING_SEPARATOR,
    combine_greeting,
    is_blank,
    normalize_language,
    select_time_greeting,
)
from .enums import OutputFormat
from .errors import ConfigurationError, TranslationError

__all__ = [
    # Behaviors
    "DEFAULT_LANGUAGE",
    "GOOD_AFTERNOON",
    "GOOD_EVENING",
    "GOOD_MORNING",
    "GREETING_SEPARATOR",
    "combine_greeting",
    "is_blank",
    "normalize_language",
    "select_time_greeting",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "TranslationError",
]
