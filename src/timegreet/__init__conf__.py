"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so the CLI can report
metadata without querying the installed distribution at runtime.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` rendering the constants for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "timegreet"
#: Human-readable summary shown in CLI help output.
title = "Time-of-day greeting, translated via DeepL"
#: Current release version pulled from pyproject.toml.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/timegreet/timegreet"
#: Author attribution surfaced in CLI output.
author = "timegreet maintainers"
#: Contact email surfaced in CLI output.
author_email = "maintainers@timegreet.dev"
#: Console-script name published by the package.
shell_command = "timegreet"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "timegreet"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "timegreet"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "timegreet"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for timegreet:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
