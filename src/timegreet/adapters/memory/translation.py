"""In-memory translation adapter for testing.

Contents:
    * :class:`TranslatorSpy` - Canned translations plus a record of every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config


def _empty_translations() -> dict[str, str]:
    return {}


def _empty_calls() -> list[tuple[str, str]]:
    return []


@dataclass
class TranslatorSpy:
    """Translate from a lookup table and capture each request.

    Behaves like the production translator's contract: unknown texts and an
    ``unreachable`` provider both yield the input unchanged.

    Attributes:
        translations: Exact-match lookup from source text to translated text.
        calls: ``(text, target_language)`` for every call, in order.
        unreachable: When True, every call returns the input text.
        built_with: Configs passed to :meth:`build`, for wiring assertions.

    Example:
        >>> spy = TranslatorSpy(translations={"Good morning": "Guten Morgen"})
        >>> spy("Good morning", "DE")
        'Guten Morgen'
        >>> spy("Welcome!", "DE")
        'Welcome!'
        >>> spy.calls
        [('Good morning', 'DE'), ('Welcome!', 'DE')]
    """

    translations: dict[str, str] = field(default_factory=_empty_translations)
    calls: list[tuple[str, str]] = field(default_factory=_empty_calls)
    unreachable: bool = False
    built_with: list[Config] = field(default_factory=list)

    def __call__(self, text: str, target_language: str) -> str:
        self.calls.append((text, target_language))
        if self.unreachable:
            return text
        return self.translations.get(text, text)

    def build(self, config: Config) -> TranslatorSpy:
        """Satisfy the ``BuildTranslator`` port by returning this spy."""
        self.built_with.append(config)
        return self

    def clear(self) -> None:
        """Reset captured calls for the next test."""
        self.calls.clear()
        self.built_with.clear()


__all__ = ["TranslatorSpy"]
