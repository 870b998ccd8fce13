"""Configuration adapter - loading, settings file merge, overrides, display.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.settings_file` - ``appsettings.json`` merge with case-insensitive keys
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.models` - Pydantic models for the greeting and translation sections
    * :mod:`.display` - Configuration display in human/JSON formats
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .models import (
    GreetingSettings,
    TranslationSettings,
    load_greeting_settings,
    load_translation_settings,
)
from .overrides import apply_overrides
from .settings_file import discover_settings_file, load_settings_file

__all__ = [
    "GreetingSettings",
    "TranslationSettings",
    "apply_overrides",
    "discover_settings_file",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeting_settings",
    "load_settings_file",
    "load_translation_settings",
]
