"""State handed from the root group to subcommands, plus traceback flag helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from timegreet.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as stored in lib_cli_exit_tools.config."""


@dataclass(slots=True)
class CLIContext:
    """Resolved state for one invocation.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Layered config with the settings file and ``--set`` merged in.
        services: Adapters wired by the composition root.
        profile: ``--profile`` value, if any.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
) -> None:
    """Swap the services factory in ``ctx.obj`` for a :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If ``ctx.obj`` still holds something else.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock(), profile="dev")
        >>> get_cli_context(ctx).profile
        'dev'
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, colored tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback_force_color
        True
        >>> apply_traceback_preferences(False)
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    cfg = lib_cli_exit_tools.config
    return bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags read by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
