"""Process-level wrapper around the Click group.

Turns every way a command can end (normal return, Click usage error,
``SystemExit`` raised by a command, unexpected exception) into an integer
exit status, and tears down lib_log_rich once the run is over.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from timegreet import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from timegreet.composition import AppServices


def _exit_code_from_system_exit(exc: SystemExit) -> int:
    """Map ``SystemExit.code`` onto an integer status.

    Examples:
        >>> _exit_code_from_system_exit(SystemExit(78))
        78
        >>> _exit_code_from_system_exit(SystemExit(None))
        0
        >>> _exit_code_from_system_exit(SystemExit("boom"))
        1
    """
    if exc.code is None:
        return 0
    if isinstance(exc.code, int):
        return int(exc.code)
    return 1


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit status.

    The ``--traceback`` flag decides between a truncated summary and the
    full traceback.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return _exit_code_from_system_exit(exc)
    except BaseException as exc:  # KeyboardInterrupt included
        return _report_unexpected(exc)
    return 0


def _shutdown_logging() -> None:
    # Only the main thread may stop the runtime; worker threads share it.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``timegreet`` once and return the exit status.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put lib_cli_exit_tools' traceback flags back afterwards.
        services_factory: ``build_production`` for real runs, ``build_testing`` in tests.

    Raises:
        ValueError: If no services factory is given.

    Example:
        >>> from timegreet.composition import build_testing
        >>> main(["greet"], services_factory=build_testing)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    saved = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
