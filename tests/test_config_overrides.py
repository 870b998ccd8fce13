"""Unit tests for CLI configuration overrides (--set SECTION.KEY=VALUE).

Tests cover parsing, value coercion, nest-override mechanics, and full
apply_overrides integration with the Config class.
"""

from __future__ import annotations

from typing import Any

import pytest
from lib_layered_config import Config

from timegreet.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override tests ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    """SECTION.KEY=VALUE produces the section and a single-element key_path."""
    result = parse_override("greeting.language=DE")

    assert result == ConfigOverride(section="greeting", key_path=("language",), value="DE")


@pytest.mark.os_agnostic
def test_parse_override_lowercases_names_but_not_values() -> None:
    """Greeting.Message addresses greeting.message; the value keeps its case."""
    result = parse_override("Greeting.Message=Welcome Home!")

    assert result.section == "greeting"
    assert result.key_path == ("message",)
    assert result.value == "Welcome Home!"


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    """Dotted key path beyond the section creates a multi-element key_path."""
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_value_containing_equals() -> None:
    """Everything after the first '=' is the value."""
    assert parse_override("greeting.message=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_override_empty_value() -> None:
    assert parse_override("greeting.language=").value == ""


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "pattern"),
    [
        ("greeting.language", "missing '='"),
        ("greeting=DE", "the key needs a dot"),
        ("=DE", "the key needs a dot"),
        (".language=DE", "empty section name"),
        ("greeting..language=DE", "empty key name"),
        ("greeting.language.=DE", "empty key name"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, pattern: str) -> None:
    """Malformed overrides raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=pattern):
        parse_override(raw)


# ======================== coerce_value tests ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("10", 10),
        ("2.5", 2.5),
        ("null", None),
        ('["a", "b"]', ["a", "b"]),
        ('{"a": 1}', {"a": 1}),
        ('"quoted"', "quoted"),
    ],
)
def test_coerce_value_parses_json_literals(raw: str, expected: Any) -> None:
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["DE", "Welcome!", "https://api.deepl.com/v2/translate", "{not json"])
def test_coerce_value_falls_back_to_plain_string(raw: str) -> None:
    """Anything that is not a JSON literal stays a string."""
    assert coerce_value(raw) == raw


# ======================== apply_overrides tests ========================


@pytest.mark.os_agnostic
def test_apply_overrides_returns_same_config_without_overrides() -> None:
    config = Config({"greeting": {"language": "DE"}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section() -> None:
    """Overrides replace one key and leave siblings alone."""
    config = Config({"greeting": {"message": "Welcome!", "language": "DE"}}, {})

    result = apply_overrides(config, ("greeting.language=FR",))

    assert result.get("greeting.language") == "FR"
    assert result.get("greeting.message") == "Welcome!"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_sections() -> None:
    result = apply_overrides(Config({}, {}), ("translation.timeout=3",))

    assert result.get("translation.timeout") == 3


@pytest.mark.os_agnostic
def test_apply_overrides_last_value_wins_for_repeated_keys() -> None:
    result = apply_overrides(Config({}, {}), ("greeting.language=DE", "greeting.language=IT"))

    assert result.get("greeting.language") == "IT"


@pytest.mark.os_agnostic
def test_apply_overrides_combines_several_sections() -> None:
    result = apply_overrides(
        Config({}, {}),
        ("greeting.message=Hi", "greeting.language=ES", "lib_log_rich.console_level=DEBUG"),
    )

    assert result.get("greeting.message") == "Hi"
    assert result.get("greeting.language") == "ES"
    assert result.get("lib_log_rich.console_level") == "DEBUG"


@pytest.mark.os_agnostic
def test_apply_overrides_rejects_scalar_in_key_path() -> None:
    """A nested path cannot pass through a value set earlier in the same call."""
    with pytest.raises(TypeError, match="'timeout' already holds a int"):
        apply_overrides(Config({}, {}), ("translation.timeout=3", "translation.timeout.value=4"))


@pytest.mark.os_agnostic
def test_apply_overrides_propagates_parse_errors() -> None:
    with pytest.raises(ValueError, match="missing '='"):
        apply_overrides(Config({}, {}), ("greeting.language",))
