"""Render the merged timegreet configuration for the ``config`` command.

Flushes pending log output first so log lines do not interleave with the
rendered configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from timegreet.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one ``section`` of it) with provenance comments.

    Args:
        config: Merged configuration, including --settings and --set values.
        output_format: HUMAN for TOML-like output, JSON for machine-readable output.
        section: Optional section name, e.g. ``greeting`` or ``translation``.
        console: Optional Rich Console, mainly for tests.
        profile: Active --profile, shown next to each value's source.

    Raises:
        ValueError: If the requested section does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
