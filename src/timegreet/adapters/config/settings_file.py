"""Merge an ``appsettings.json``-style file into the layered Config.

The settings file uses the familiar ``{"Greeting": {"Message": ..., "Language": ...}}``
shape. Keys are matched case-insensitively by lower-casing every mapping key
before the merge, so ``Greeting.Message`` lands on ``greeting.message``.

Without ``--settings`` or ``TIMEGREET_SETTINGS``, an ``appsettings.json`` in the
working directory is merged automatically. A missing file at that default
location is not an error; a missing explicit path is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

import orjson
from lib_layered_config import Config

logger = logging.getLogger(__name__)

#: File name looked up in the working directory when no path is given.
DEFAULT_SETTINGS_FILENAME = "appsettings.json"


def _lower_keys(value: object) -> object:
    """Recursively lower-case mapping keys, leaving values untouched.

    Examples:
        >>> _lower_keys({"Greeting": {"Message": "Hi", "Language": "DE"}})
        {'greeting': {'message': 'Hi', 'language': 'DE'}}
        >>> _lower_keys(["A", {"B": 1}])
        ['A', {'b': 1}]
    """
    if isinstance(value, dict):
        return {str(key).lower(): _lower_keys(item) for key, item in cast("dict[object, object]", value).items()}
    if isinstance(value, list):
        return [_lower_keys(item) for item in cast("list[object]", value)]
    return value


def read_settings_file(path: Path) -> dict[str, dict[str, object]]:
    """Parse a JSON settings file into section dictionaries with lower-cased keys.

    Args:
        path: Path to an existing JSON file.

    Returns:
        Mapping of section name to section contents.

    Raises:
        ValueError: If the file cannot be read, is not valid JSON, or its
            top level is not an object of objects.
    """
    try:
        payload: object = orjson.loads(path.read_bytes())
    except OSError as exc:
        raise ValueError(f"Cannot read settings file {path}: {exc}") from exc
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"Settings file {path} is not valid JSON: {exc}") from exc

    normalized = _lower_keys(payload)
    if not isinstance(normalized, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    sections = cast("dict[str, object]", normalized)
    for name, section in sections.items():
        if not isinstance(section, dict):
            raise ValueError(f"Settings file {path}: section {name!r} must be an object")
    return cast("dict[str, dict[str, object]]", sections)


def discover_settings_file(start_dir: Path | None = None) -> Path | None:
    """Return ``appsettings.json`` in ``start_dir`` (default: cwd) if it is a file.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     before = discover_settings_file(Path(tmp))
        ...     _ = (Path(tmp) / DEFAULT_SETTINGS_FILENAME).write_text("{}", encoding="utf-8")
        ...     after = discover_settings_file(Path(tmp))
        >>> before is None, after.name
        (True, 'appsettings.json')
    """
    candidate = (start_dir or Path.cwd()) / DEFAULT_SETTINGS_FILENAME
    return candidate if candidate.is_file() else None


def load_settings_file(config: Config, path: Path) -> Config:
    """Return a new Config with the settings file deep-merged on top.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     settings = Path(tmp) / "appsettings.json"
        ...     _ = settings.write_text('{"Greeting": {"Language": "FR"}}', encoding="utf-8")
        ...     merged = load_settings_file(Config({"greeting": {"message": "Hi"}}, {}), settings)
        >>> merged.get("greeting.language"), merged.get("greeting.message")
        ('FR', 'Hi')
    """
    sections = read_settings_file(path)
    logger.info("Merging settings file", extra={"path": str(path), "sections": sorted(sections)})
    return config.with_overrides(sections)


__all__ = [
    "DEFAULT_SETTINGS_FILENAME",
    "discover_settings_file",
    "load_settings_file",
    "read_settings_file",
]
