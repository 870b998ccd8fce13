"""Layered configuration loading for timegreet.

The bundled ``defaultconfig.toml`` is the lowest layer. lib_layered_config
stacks the app, host and user files, a ``.env`` file and ``TIMEGREET___*``
environment variables on top of it. Results are cached per
``(profile, start_dir)`` for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from timegreet import __init__conf__

_DEFAULTS_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Raises:
        ValueError: Raised by lib_layered_config for an unusable name.

    Examples:
        >>> validate_profile("staging")
        >>> validate_profile("../../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile name
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Location of ``defaultconfig.toml`` inside the installed package.

    Example:
        >>> get_default_config_path().is_file()
        True
    """
    return _DEFAULTS_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULTS_FILE,
        start_dir=start_dir,
    )


class _ConfigLoader:
    """Callable front for :func:`_read_layers` that validates the profile first."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration for ``profile``.

        Example:
            >>> get_config().get("translation.api_key_env")
            'DEEPL_API_KEY'
        """
        if profile is not None:
            validate_profile(profile)
        return _read_layers(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget cached results so the next call reads the layers again."""
        _read_layers.cache_clear()


#: Shared loader; ``get_config.cache_clear()`` resets it between tests.
get_config = _ConfigLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
