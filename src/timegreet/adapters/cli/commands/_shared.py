"""Shared helpers for CLI command modules.

Contents:
    * :func:`log_context` - Bind per-command logging context when logging is live.
    * :func:`read_greeting_settings` - Parse ``[greeting]``, reporting bad values as usage errors.
    * :func:`build_use_cases` - Construct the greeting use cases from CLI state.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import Any

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from timegreet.adapters.config.models import GreetingSettings, load_greeting_settings
from timegreet.application.greeting import GreetingOrchestrator, TimeGreetingProvider
from timegreet.application.ports import Translate

from ..context import CLIContext


def log_context(job_id: str, **extra: Any) -> AbstractContextManager[Any]:
    """Return a lib_log_rich binding for ``job_id``.

    In-memory wiring never initializes the runtime; a null context is
    returned then so commands run unchanged under tests.
    """
    if not lib_log_rich.runtime.is_initialised():
        return nullcontext()
    return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)


def read_greeting_settings(cli_ctx: CLIContext) -> GreetingSettings:
    """Parse the merged ``[greeting]`` section.

    Raises:
        click.UsageError: If a value cannot be read as text, e.g. a list.
    """
    try:
        return load_greeting_settings(cli_ctx.config)
    except ValidationError as exc:
        fields = ", ".join(f"greeting.{error['loc'][0]}" for error in exc.errors())
        raise click.UsageError(f"Invalid greeting configuration: {fields} must be text") from exc


def build_use_cases(
    cli_ctx: CLIContext, settings: GreetingSettings, translate: Translate
) -> GreetingOrchestrator:
    """Wire the time greeting provider and orchestrator for one run.

    Output goes through ``click.echo`` so it lands on stdout exactly once.
    """
    provider = TimeGreetingProvider(
        translate=translate,
        current_hour=cli_ctx.services.current_hour,
        language=settings.language,
    )
    return GreetingOrchestrator(
        message=settings.message,
        language=settings.language,
        time_greeting=provider,
        translate=translate,
        write_line=click.echo,
    )


__all__ = ["build_use_cases", "log_context", "read_greeting_settings"]
