"""Settings file stories: appsettings.json merged into the layered Config."""

from __future__ import annotations

from pathlib import Path

import pytest
from lib_layered_config import Config

from timegreet.adapters.config.settings_file import (
    DEFAULT_SETTINGS_FILENAME,
    discover_settings_file,
    load_settings_file,
    read_settings_file,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "appsettings.json"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.os_agnostic
def test_read_settings_file_lowercases_section_and_key_names(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"Greeting": {"Message": "Welcome!", "Language": "DE"}}')

    assert read_settings_file(path) == {"greeting": {"message": "Welcome!", "language": "DE"}}


@pytest.mark.os_agnostic
def test_read_settings_file_keeps_values_as_written(tmp_path: Path) -> None:
    """Only keys are normalized; values keep their case."""
    path = _write(tmp_path, '{"greeting": {"message": "Hello World!"}}')

    assert read_settings_file(path)["greeting"]["message"] == "Hello World!"


@pytest.mark.os_agnostic
def test_read_settings_file_rejects_invalid_json(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"Greeting": ')

    with pytest.raises(ValueError, match="not valid JSON"):
        read_settings_file(path)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("content", ['["Greeting"]', '"Welcome!"', "42"])
def test_read_settings_file_requires_top_level_object(tmp_path: Path, content: str) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ValueError, match="must contain a JSON object"):
        read_settings_file(path)


@pytest.mark.os_agnostic
def test_read_settings_file_requires_sections_to_be_objects(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"Greeting": "Welcome!"}')

    with pytest.raises(ValueError, match="section 'greeting' must be an object"):
        read_settings_file(path)


@pytest.mark.os_agnostic
def test_read_settings_file_reports_unreadable_path(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Cannot read settings file"):
        read_settings_file(tmp_path / "missing.json")


@pytest.mark.os_agnostic
def test_load_settings_file_overrides_matching_keys_and_keeps_the_rest(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"Greeting": {"Language": "FR"}}')
    base = Config({"greeting": {"message": "Welcome!", "language": "DE"}, "translation": {"timeout": 3}}, {})

    merged = load_settings_file(base, path)

    assert merged.get("greeting.language") == "FR"
    assert merged.get("greeting.message") == "Welcome!"
    assert merged.get("translation.timeout") == 3


@pytest.mark.os_agnostic
def test_load_settings_file_leaves_the_original_config_untouched(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"greeting": {"language": "FR"}}')
    base = Config({"greeting": {"language": "DE"}}, {})

    load_settings_file(base, path)

    assert base.get("greeting.language") == "DE"


@pytest.mark.os_agnostic
def test_discover_settings_file_finds_appsettings_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    expected = tmp_path / DEFAULT_SETTINGS_FILENAME
    expected.write_text("{}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert discover_settings_file() == expected


@pytest.mark.os_agnostic
def test_discover_settings_file_returns_none_without_a_file(tmp_path: Path) -> None:
    (tmp_path / DEFAULT_SETTINGS_FILENAME).mkdir()

    assert discover_settings_file(tmp_path) is None
    assert discover_settings_file(tmp_path / "elsewhere") is None
