"""Root CLI command group and global option handling.

Handles the global flags shared by every subcommand: ``--traceback``,
``--profile``, ``--settings`` and ``--set``.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from timegreet import __init__conf__
from timegreet.adapters.config.overrides import apply_overrides
from timegreet.adapters.config.settings_file import discover_settings_file

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from timegreet.composition import AppServices


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Load the layered configuration, reporting a bad profile as a usage error."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.UsageError(f"Invalid profile: {exc}") from exc


def _merge_settings_file(services: AppServices, config: Config, settings: Path | None) -> Config:
    """Merge the settings file, reporting parse failures against ``--settings``.

    Without an explicit path, ``appsettings.json`` in the working directory is
    used when present.
    """
    if settings is None:
        settings = discover_settings_file()
    if settings is None:
        return config
    try:
        return services.load_settings_file(config, settings)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--settings'") from exc


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, raising UsageError on malformed input."""
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--settings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    envvar="TIMEGREET_SETTINGS",
    help="JSON settings file with Greeting.Message and Greeting.Language (default: ./appsettings.json if present)",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. greeting.language=FR",
)
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    profile: str | None,
    settings: Path | None,
    set_overrides: tuple[str, ...],
) -> None:
    """Resolve configuration once and share it with every subcommand.

    Order of precedence, lowest first: layered config (defaults, app, host,
    user, .env, environment), the settings file (``--settings`` or
    ./appsettings.json), ``--set`` overrides.
    Logging is initialized from the merged result.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile)
    config = _merge_settings_file(services, config, settings)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(ctx, traceback=traceback, config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration is deferred until
# the group exists.
def _register_commands() -> None:
    from .commands import cli_config, cli_greet, cli_info, cli_translate

    for cmd in (cli_greet, cli_translate, cli_config, cli_info):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
