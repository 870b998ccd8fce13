"""Greeting use cases: time-of-day greeting and the translated welcome line.

Both use cases receive every collaborator through their constructor. The
composition layer (or a test) decides which translator, clock, and writer
are plugged in.

Contents:
    * :class:`TimeGreetingProvider` - Picks and translates the time greeting.
    * :class:`GreetingOrchestrator` - Combines, translates, and prints the greeting.
"""

from __future__ import annotations

import logging

from ..domain.behaviors import (
    DEFAULT_LANGUAGE,
    combine_greeting,
    is_blank,
    select_time_greeting,
)
from ..domain.errors import ConfigurationError
from .ports import CurrentHour, Translate, WriteLine

logger = logging.getLogger(__name__)


class TimeGreetingProvider:
    """Derive a greeting from the local hour and translate it.

    Example:
        >>> provider = TimeGreetingProvider(
        ...     translate=lambda text, lang: text,
        ...     current_hour=lambda: 15,
        ...     language="DE",
        ... )
        >>> provider.get_time_greeting()
        'Good afternoon'
    """

    def __init__(self, *, translate: Translate, current_hour: CurrentHour, language: str | None = None) -> None:
        self._translate = translate
        self._current_hour = current_hour
        self._language = DEFAULT_LANGUAGE if is_blank(language) else str(language)

    @property
    def language(self) -> str:
        """Target language used for the greeting phrase."""
        return self._language

    def get_time_greeting(self) -> str:
        """Return the (possibly untranslated) greeting for the current hour."""
        greeting = select_time_greeting(self._current_hour())
        translated = self._translate(greeting, self._language)
        logger.info("Time-based greeting translated", extra={"greeting": translated, "language": self._language})
        return translated


class GreetingOrchestrator:
    """Build the final greeting line and write it exactly once.

    The combined ``"<time greeting>! <message>"`` is translated as a whole.
    When the provider hands back the text unchanged, only the time greeting
    is translated again and the line is rebuilt from that result.

    Example:
        >>> lines: list[str] = []
        >>> provider = TimeGreetingProvider(
        ...     translate=lambda text, lang: text, current_hour=lambda: 20, language="EN"
        ... )
        >>> orchestrator = GreetingOrchestrator(
        ...     message="Welcome!",
        ...     language="EN",
        ...     time_greeting=provider,
        ...     translate=lambda text, lang: text,
        ...     write_line=lines.append,
        ... )
        >>> orchestrator.run()
        >>> lines
        ['Good evening! Welcome!']
    """

    def __init__(
        self,
        *,
        message: str | None,
        language: str | None,
        time_greeting: TimeGreetingProvider,
        translate: Translate,
        write_line: WriteLine,
    ) -> None:
        self._message = message
        self._language = language
        self._time_greeting = time_greeting
        self._translate = translate
        self._write_line = write_line

    def compose(self) -> str:
        """Return the final greeting line without writing it.

        Raises:
            ConfigurationError: If the message or language is missing or blank.
        """
        message, language = self._require_settings()
        logger.info("Configuration loaded", extra={"greeting_message": message, "language": language})

        time_greeting = self._time_greeting.get_time_greeting()
        combined = combine_greeting(time_greeting, message)
        logger.info("Combining greeting and message before translation", extra={"combined": combined})

        translated = self._translate(combined, language)
        if translated == combined:
            logger.info("Combined text came back unchanged; translating the time greeting alone")
            translated = combine_greeting(self._translate(time_greeting, language), message)

        logger.info("Final translated message", extra={"translated": translated})
        return translated

    def run(self, *, strict: bool = False) -> None:
        """Compose the greeting and write it once.

        Args:
            strict: Re-raise :class:`ConfigurationError` instead of only logging it.

        Raises:
            ConfigurationError: Only when ``strict`` is set and configuration is incomplete.
        """
        logger.info("Greeting run started")
        try:
            final_message = self.compose()
        except ConfigurationError as exc:
            logger.error("Invalid configuration: %s", exc)
            if strict:
                raise
            return
        self._write_line(final_message)

    def _require_settings(self) -> tuple[str, str]:
        missing = [
            name
            for name, value in (("greeting.message", self._message), ("greeting.language", self._language))
            if is_blank(value)
        ]
        if missing:
            raise ConfigurationError(f"{' and '.join(missing)} missing or blank")
        return str(self._message), str(self._language)


__all__ = [
    "GreetingOrchestrator",
    "TimeGreetingProvider",
]
