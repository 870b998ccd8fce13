"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function or callable object. Module-level
functions and instances with ``__call__`` satisfy these protocols via
structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so the application layer never
    imports adapters at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class Translate(Protocol):
    """Translate English text into ``target_language``, returning the input on failure."""

    def __call__(self, text: str, target_language: str) -> str: ...


class CurrentHour(Protocol):
    """Return the local wall-clock hour (0-23)."""

    def __call__(self) -> int: ...


class WriteLine(Protocol):
    """Write one line of user-facing output."""

    def __call__(self, message: str) -> None: ...


class BuildTranslator(Protocol):
    """Construct a translator from the ``[translation]`` configuration section."""

    def __call__(self, config: Config) -> Translate: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class LoadSettingsFile(Protocol):
    """Merge a JSON settings file on top of an already-loaded Config."""

    def __call__(self, config: Config, path: Path) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildTranslator",
    "CurrentHour",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadSettingsFile",
    "Translate",
    "WriteLine",
]
