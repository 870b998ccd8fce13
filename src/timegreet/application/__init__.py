"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.greeting` - Time greeting provider and greeting orchestrator
"""

from __future__ import annotations

from .greeting import GreetingOrchestrator, TimeGreetingProvider
from .ports import (
    BuildTranslator,
    CurrentHour,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadSettingsFile,
    Translate,
    WriteLine,
)

__all__ = [
    "BuildTranslator",
    "CurrentHour",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "GreetingOrchestrator",
    "InitLogging",
    "LoadSettingsFile",
    "TimeGreetingProvider",
    "Translate",
    "WriteLine",
]
