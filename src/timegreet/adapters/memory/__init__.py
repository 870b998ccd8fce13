"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that run entirely in
memory -- no configuration files, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.translation` - TranslatorSpy with canned translations
    * :mod:`.clock` - FixedClock
    * :mod:`.logging` - No-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import FixedClock
from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .translation import TranslatorSpy

# Static conformance assertions
if TYPE_CHECKING:
    from timegreet.application.ports import (
        CurrentHour,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        Translate,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_translate: Translate = TranslatorSpy()
    _assert_current_hour: CurrentHour = FixedClock()

__all__ = [
    "FixedClock",
    "TranslatorSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
