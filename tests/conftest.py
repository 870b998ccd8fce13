"""Shared pytest fixtures for domain, adapter, and CLI tests.

Fixtures use descriptive names that read as plain English:
- ``translator_spy`` / ``fixed_clock`` are the in-memory doubles
- ``greeting_services`` wires them (plus an injected Config) for CLI runs
- ``deepl_transport`` records HTTP requests made by the real translator
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from timegreet.adapters.memory import FixedClock, TranslatorSpy

if TYPE_CHECKING:
    from timegreet.composition import AppServices


def _load_dotenv() -> None:
    """Load .env when present so the live DeepL test can find its key."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(type(lib_cli_exit_tools.config)))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for the greeting line; errors and log output go to stderr.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset ``lib_cli_exit_tools.config`` to a clean baseline and restore it afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}
    try:
        yield
    finally:
        for name, value in snapshot.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` lru_cache before the test."""
    from timegreet.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def translator_spy() -> TranslatorSpy:
    """Provide a pass-through TranslatorSpy."""
    return TranslatorSpy()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Provide a clock frozen at 09:00."""
    return FixedClock(hour=9)


@pytest.fixture
def greeting_services(
    translator_spy: TranslatorSpy,
    fixed_clock: FixedClock,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into an in-memory services factory.

    The spy and clock fixtures are the ones wired in, so tests can tune
    ``translator_spy.translations`` or ``fixed_clock.hour`` before invoking.

    Example:
        def test_greet(cli_runner, greeting_services) -> None:
            factory = greeting_services({"greeting": {"message": "Hi", "language": "DE"}})
            result = cli_runner.invoke(cli, ["greet"], obj=factory)
    """
    from timegreet.composition import build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        return lambda: build_testing(translator=translator_spy, clock=fixed_clock, config=config)

    return _create


@dataclass
class RecordingTransport:
    """A ``httpx.MockTransport`` that answers with a fixed response and keeps every request."""

    status_code: int = 200
    body: bytes = b'{"translations": []}'
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body, headers={"Content-Type": "application/json"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def respond_with_json(self, payload: object, status_code: int = 200) -> None:
        self.body = orjson.dumps(payload)
        self.status_code = status_code

    def sent_json(self, index: int = 0) -> Any:
        return orjson.loads(self.requests[index].content)


@pytest.fixture
def deepl_transport() -> RecordingTransport:
    """Provide a recording transport answering with an empty translation list."""
    return RecordingTransport()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Return the production services factory for real-adapter CLI runs."""
    from timegreet.composition import build_production

    return build_production


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
    translator_spy: TranslatorSpy,
    fixed_clock: FixedClock,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory with an injected Config and the real display adapter.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeting": {"language": "DE"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "DE" in result.output
    """
    from dataclasses import replace

    from timegreet.composition import build_production, build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        services = replace(
            build_testing(translator=translator_spy, clock=fixed_clock, config=config),
            display_config=build_production().display_config,
        )
        return lambda: services

    return _create
