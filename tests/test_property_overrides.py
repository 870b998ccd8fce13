"""Property-based tests for CLI configuration overrides.

Uses hypothesis to check that ``parse_override`` and ``coerce_value`` keep
their contracts for arbitrary strings, not just hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from timegreet.adapters.config.overrides import coerce_value, parse_override

ALLOWED_COERCED_TYPES = (str, int, float, bool, type(None), list, dict)
IDENTIFIER = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    """coerce_value always returns str, int, float, bool, None, list, or dict."""
    assert isinstance(coerce_value(raw), ALLOWED_COERCED_TYPES)


@pytest.mark.os_agnostic
@given(value=st.integers(min_value=-(2**53), max_value=2**53))
def test_coerce_value_round_trips_integers(value: int) -> None:
    assert coerce_value(str(value)) == value


@pytest.mark.os_agnostic
@given(raw=IDENTIFIER.filter(lambda s: s not in ("true", "false", "null")))
@settings(max_examples=200)
def test_coerce_value_language_codes_and_words_stay_strings(raw: str) -> None:
    """Identifier-like values such as DE or Welcome fall back to the raw string."""
    assert coerce_value(raw) == raw


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, key=IDENTIFIER, value=st.text(min_size=0, max_size=50))
@settings(max_examples=200)
def test_parse_override_lowercases_section_and_key(section: str, key: str, value: str) -> None:
    """Names are case-insensitive; the value is coerced but never case-folded."""
    result = parse_override(f"{section}.{key}={value}")

    assert result.section == section.lower()
    assert result.key_path == (key.lower(),)
    assert result.value == coerce_value(value)


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, key1=IDENTIFIER, key2=IDENTIFIER)
def test_parse_override_nested_keys_produce_key_path(section: str, key1: str, key2: str) -> None:
    result = parse_override(f"{section}.{key1}.{key2}=1")

    assert result.key_path == (key1.lower(), key2.lower())


@pytest.mark.os_agnostic
@given(raw=st.text().filter(lambda s: "=" not in s))
@settings(max_examples=200)
def test_parse_override_rejects_strings_without_equals(raw: str) -> None:
    with pytest.raises(ValueError, match="missing '='"):
        parse_override(raw)


@pytest.mark.os_agnostic
@given(
    key_part=st.text(min_size=1).filter(lambda s: "." not in s and "=" not in s),
    value=st.text(min_size=0, max_size=20),
)
@settings(max_examples=200)
def test_parse_override_rejects_strings_without_dot_in_key(key_part: str, value: str) -> None:
    with pytest.raises(ValueError, match="the key needs a dot"):
        parse_override(f"{key_part}={value}")
