"""The ``translate`` command: run the translator on arbitrary text.

Contents:
    * :func:`cli_translate` - Translate one text and print the result.
"""

from __future__ import annotations

import logging

import rich_click as click

from timegreet.domain.behaviors import DEFAULT_LANGUAGE

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import log_context, read_greeting_settings

logger = logging.getLogger(__name__)


@click.command("translate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--to",
    "target_language",
    default=None,
    metavar="LANG",
    help="Target language code (defaults to greeting.language, then EN)",
)
@click.pass_context
def cli_translate(ctx: click.Context, text: str, target_language: str | None) -> None:
    """Translate TEXT from English and print it.

    The original TEXT is printed when translation is unavailable.
    """
    cli_ctx = get_cli_context(ctx)
    language = target_language or read_greeting_settings(cli_ctx).language or DEFAULT_LANGUAGE

    with log_context("cli-translate", command="translate", language=language):
        translator = cli_ctx.services.build_translator(cli_ctx.config)
        result = translator(text, language)
        logger.info("Translate command finished", extra={"changed": result != text})
        click.echo(result)


__all__ = ["cli_translate"]
