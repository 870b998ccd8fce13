"""Pydantic boundary models for the ``[greeting]`` and ``[translation]`` sections.

Configuration arrives as loosely typed dictionaries from TOML, JSON, .env
files and environment variables. These models parse it once at the boundary
so the rest of the code works with typed, immutable values.

Contents:
    * :class:`GreetingSettings` - message and target language.
    * :class:`TranslationSettings` - DeepL endpoint, timeout, and credential source.
    * :func:`load_greeting_settings` / :func:`load_translation_settings` - Config readers.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "https://api-free.deepl.com/v2/translate"
DEFAULT_API_KEY_ENV = "DEEPL_API_KEY"


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _scalar_to_text(v: Any) -> Any:
    """Render JSON scalars as the text a settings file would show.

    Examples:
        >>> _scalar_to_text(2024), _scalar_to_text(2.5), _scalar_to_text(True)
        ('2024', '2.5', 'true')
        >>> _scalar_to_text(None) is None
        True
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int | float):
        return str(v)
    return v


class GreetingSettings(BaseModel):
    """Validated ``[greeting]`` section.

    Blank strings are treated as "not configured". Numbers and booleans, as
    produced by ``--set`` coercion or a JSON settings file, become text.

    Examples:
        >>> GreetingSettings.model_validate({"message": "Welcome!", "language": "  "})
        GreetingSettings(message='Welcome!', language=None)
        >>> GreetingSettings.model_validate({"message": 2024}).message
        '2024'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str | None = None
    language: str | None = None

    @field_validator("message", "language", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _blank_to_none(_scalar_to_text(v))


class TranslationSettings(BaseModel):
    """Validated ``[translation]`` section.

    Example:
        >>> settings = TranslationSettings()
        >>> settings.endpoint
        'https://api-free.deepl.com/v2/translate'
        >>> settings.resolve_api_key({"DEEPL_API_KEY": "abc:fx"})
        'abc:fx'
        >>> TranslationSettings(api_key="explicit").resolve_api_key({"DEEPL_API_KEY": "env"})
        'explicit'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    endpoint: str = DEFAULT_ENDPOINT
    source_lang: str = "EN"
    timeout: float = Field(default=10.0, gt=0)
    api_key_env: str = DEFAULT_API_KEY_ENV
    api_key: str | None = None

    @field_validator("api_key", mode="before")
    @classmethod
    def _coerce_blank_key(cls, v: Any) -> Any:
        return _blank_to_none(v)

    def resolve_api_key(self, environ: Mapping[str, str] | None = None) -> str:
        """Return the explicit key, else the value of ``api_key_env``, else ``""``."""
        if self.api_key:
            return self.api_key
        env = os.environ if environ is None else environ
        return env.get(self.api_key_env, "").strip()


def _section(config: Config, name: str) -> dict[str, Any]:
    raw: object = config.get(name, default={})
    return cast("dict[str, Any]", raw) if isinstance(raw, dict) else {}


def load_greeting_settings(config: Config) -> GreetingSettings:
    """Parse the ``[greeting]`` section of ``config``.

    Example:
        >>> load_greeting_settings(Config({"greeting": {"message": "Hi"}}, {})).language is None
        True
    """
    return GreetingSettings.model_validate(_section(config, "greeting"))


def load_translation_settings(config: Config) -> TranslationSettings:
    """Parse the ``[translation]`` section of ``config``."""
    return TranslationSettings.model_validate(_section(config, "translation"))


__all__ = [
    "DEFAULT_API_KEY_ENV",
    "DEFAULT_ENDPOINT",
    "GreetingSettings",
    "TranslationSettings",
    "load_greeting_settings",
    "load_translation_settings",
]
