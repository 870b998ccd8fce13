"""``--set SECTION.KEY=VALUE`` overrides, applied after every other config source.

Names are case-insensitive (``Greeting.Language`` equals ``greeting.language``),
values are read as JSON literals where possible so ``translation.timeout=2.5``
becomes a float and ``greeting.language=DE`` stays a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything :func:`coerce_value` may return."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` entry: ``section`` plus the key path below it."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted(self) -> str:
        """``section.key.subkey`` form, used in error messages.

        Example:
            >>> ConfigOverride("translation", ("timeout",), 3).dotted
            'translation.timeout'
        """
        return ".".join((self.section, *self.key_path))


def parse_override(raw: str) -> ConfigOverride:
    """Parse one ``SECTION.KEY[.SUBKEY...]=VALUE`` string.

    Raises:
        ValueError: On a missing ``=``, a key without a dot, or an empty name.

    Examples:
        >>> override = parse_override("Greeting.Language=FR")
        >>> override.section, override.key_path, override.value
        ('greeting', ('language',), 'FR')

        >>> parse_override("translation.timeout=2.5").value
        2.5

        >>> parse_override("greeting=FR")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: --set 'greeting=FR': expected SECTION.KEY=VALUE
    """
    name, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r}: missing '=' (expected SECTION.KEY=VALUE)")
    if "." not in name:
        raise ValueError(f"--set {raw!r}: expected SECTION.KEY=VALUE, the key needs a dot")

    parts = [part.strip().lower() for part in name.split(".")]
    if not parts[0]:
        raise ValueError(f"--set {raw!r}: empty section name")
    if not all(parts[1:]):
        raise ValueError(f"--set {raw!r}: empty key name")
    return ConfigOverride(section=parts[0], key_path=tuple(parts[1:]), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal, or keep it as text.

    Examples:
        >>> coerce_value("true"), coerce_value("10"), coerce_value("null")
        (True, 10, None)
        >>> coerce_value("Welcome!")
        'Welcome!'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return cast(CoercedValue, orjson.loads(raw))
    except orjson.JSONDecodeError:
        return raw


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` at its path in ``tree``.

    Raises:
        TypeError: If an earlier override already put a scalar on the path.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, parse_override("greeting.message=Hi"))
        >>> tree
        {'greeting': {'message': 'Hi'}}
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for parent in parents:
        child = node.setdefault(parent, {})
        if not isinstance(child, dict):
            raise TypeError(f"--set {override.dotted}: {parent!r} already holds a {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` entry merged in; later entries win.

    Raises:
        ValueError: If an entry cannot be parsed.

    Examples:
        >>> cfg = Config({"greeting": {"message": "Hi"}}, {})
        >>> merged = apply_overrides(cfg, ("greeting.language=DE",))
        >>> merged.get("greeting.language"), merged.get("greeting.message")
        ('DE', 'Hi')
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
