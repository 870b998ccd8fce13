"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.clock import current_local_hour
from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings_file import load_settings_file

# Logging services
from ..adapters.logging.setup import init_logging

# Translation services
from ..adapters.translation.deepl import create_translator

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.memory import FixedClock, TranslatorSpy
    from ..application.ports import (
        BuildTranslator,
        CurrentHour,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadSettingsFile,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_load_settings_file: LoadSettingsFile = load_settings_file
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_build_translator: BuildTranslator = create_translator
    _assert_current_hour: CurrentHour = current_local_hour


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    load_settings_file: LoadSettingsFile
    display_config: DisplayConfig
    init_logging: InitLogging
    build_translator: BuildTranslator
    current_hour: CurrentHour


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        load_settings_file=load_settings_file,
        display_config=display_config,
        init_logging=init_logging,
        build_translator=create_translator,
        current_hour=current_local_hour,
    )


def _fixed_config_loader(config: Config) -> GetConfig:
    """Return a GetConfig that ignores profile and start_dir and yields ``config``."""

    def _load(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config

    return _load


def build_testing(
    *,
    translator: TranslatorSpy | None = None,
    clock: FixedClock | None = None,
    config: Config | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        translator: Optional TranslatorSpy to assert on translation calls.
            A fresh pass-through spy is created when None.
        clock: Optional FixedClock. Defaults to 09:00 local time.
        config: Optional Config returned by ``get_config``. Defaults to an
            empty in-memory Config.

    Returns:
        AppServices container with in-memory adapters. The settings-file
        loader stays real since it only reads the path it is given.
    """
    from ..adapters.memory import (
        FixedClock,
        TranslatorSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    spy = translator if translator is not None else TranslatorSpy()
    fixed_clock = clock if clock is not None else FixedClock()

    config_loader = get_config_in_memory if config is None else _fixed_config_loader(config)

    return AppServices(
        get_config=config_loader,
        get_default_config_path=get_default_config_path_in_memory,
        load_settings_file=load_settings_file,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        build_translator=spy.build,
        current_hour=fixed_clock,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "load_settings_file",
    "display_config",
    # Logging
    "init_logging",
    # Translation and clock
    "create_translator",
    "current_local_hour",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
