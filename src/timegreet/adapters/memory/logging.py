"""In-memory logging adapter for testing."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """No-op; std logging stays untouched so pytest's caplog sees every record."""


__all__ = ["init_logging_in_memory"]
