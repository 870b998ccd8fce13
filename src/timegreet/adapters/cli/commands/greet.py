"""The ``greet`` command: print the translated time-of-day greeting.

Contents:
    * :func:`cli_greet` - Run the greeting orchestrator once.
"""

from __future__ import annotations

import logging

import rich_click as click

from timegreet.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS, GREET_ACKNOWLEDGMENT
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import build_use_cases, log_context, read_greeting_settings

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Exit with code 78 instead of staying silent when greeting.message or greeting.language is missing",
)
@click.pass_context
def cli_greet(ctx: click.Context, strict: bool) -> None:
    """Print "<time greeting>! <message>" translated into greeting.language.

    Missing configuration is logged and nothing is printed. Translation
    problems never fail the command; the greeting is then printed in English.
    """
    cli_ctx = get_cli_context(ctx)
    settings = read_greeting_settings(cli_ctx)

    with log_context("cli-greet", command="greet", language=settings.language, strict=strict):
        translator = cli_ctx.services.build_translator(cli_ctx.config)
        orchestrator = build_use_cases(cli_ctx, settings, translator)
        try:
            orchestrator.run(strict=strict)
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        logger.info(GREET_ACKNOWLEDGMENT)


__all__ = ["cli_greet"]
