"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when ``greeting.message`` or ``greeting.language`` is absent or
    blank and the caller asked for a hard failure instead of a silent abort.
    Caught at the CLI boundary and mapped to ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from timegreet.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeting.language is missing")
        >>> str(err)
        'greeting.language is missing'
    """


class TranslationError(Exception):
    """The translation provider answered with something we cannot use.

    Only raised inside the translation adapter, which converts it into the
    untranslated-text fallback. It never reaches callers of the translator.

    Example:
        >>> from timegreet.domain.errors import TranslationError
        >>> str(TranslationError("response has no 'translations' list"))
        "response has no 'translations' list"
    """


__all__ = [
    "ConfigurationError",
    "TranslationError",
]
