"""Tests for the logging configuration model.

LoggingConfigModel validation is tested here. init_logging itself runs in
the production CLI tests in test_cli_core.py.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from timegreet.adapters.logging import setup as logging_setup
from timegreet.adapters.logging.setup import LoggingConfigModel

build_runtime_config = logging_setup._build_runtime_config  # pyright: ignore[reportPrivateUsage]


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "timegreet", "environment": "dev", "console_level": "INFO"})

    assert parsed.service == "timegreet"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "INFO"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name_for_service() -> None:
    config = Config({"lib_log_rich": {"environment": "test"}}, {})

    runtime_config = build_runtime_config(config)

    assert runtime_config.service == "timegreet"
    assert runtime_config.environment == "test"


@pytest.mark.os_agnostic
def test_runtime_config_uses_defaults_without_logging_section() -> None:
    config = Config({}, {})

    runtime_config = build_runtime_config(config)

    assert runtime_config.service == "timegreet"
    assert runtime_config.environment == "prod"
