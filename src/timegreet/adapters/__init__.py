"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.translation` - DeepL HTTP translator
    * :mod:`.config` - Configuration loading, settings file, overrides, display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.clock` - Local wall clock
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - rich-click CLI
"""

from __future__ import annotations

__all__: list[str] = []
