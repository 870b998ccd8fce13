"""CLI command implementations.

Contents:
    * Greeting command from :mod:`.greet`
    * Translation command from :mod:`.translate`
    * Config display command from :mod:`.config`
    * Metadata command from :mod:`.info`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_greet
from .info import cli_info
from .translate import cli_translate

__all__ = [
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_translate",
]
