"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching
lib_layered_config's file discovery or the Rich console.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Config with no sections, so greet takes the missing-configuration path."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Path under the temp dir; nothing is written there."""
    return Path(tempfile.gettempdir()) / "timegreet" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
