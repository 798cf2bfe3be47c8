"""Read the greetings configuration through lib_layered_config.

Layers merge as ``defaults -> app -> host -> user -> .env -> environment``.
The defaults layer is :data:`DEFAULT_CONFIG_FILE`, which ships the stock
``[greetings]`` and ``[lib_log_rich]`` sections. A CLI process reads each
``(profile, start_dir)`` combination once.

Contents:
    * :func:`validate_profile` - Reject unusable profile names.
    * :class:`LayeredConfigLoader` - Callable, cached loader.
    * :data:`get_config` - The process-wide loader instance.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greetings import __init__conf__

#: Bundled defaults, installed next to this module.
DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Raise ``ValueError`` unless *profile* can name a config subdirectory.

    A profile becomes a path segment (``profile/<name>/config.toml``), so
    empty names, separators and traversal are refused by lib_layered_config.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../greetings")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../greetings
    """
    validate_profile_name(profile, max_length=max_length)


class LayeredConfigLoader:
    """Load and memoise the merged configuration.

    Instances are callable with the :class:`~greetings.application.ports.GetConfig`
    signature. The profile is validated on every call, before the cache is
    consulted, so a bad name never reaches the filesystem.

    Args:
        default_file: TOML file used as the lowest-precedence layer.
        cache_size: Number of ``(profile, start_dir)`` results to keep.

    Example:
        >>> loader = LayeredConfigLoader()
        >>> loader().get("greetings.default_name")
        'Gladys'
        >>> loader() is loader()
        True
    """

    def __init__(self, default_file: Path = DEFAULT_CONFIG_FILE, cache_size: int = 4) -> None:
        self.default_file = default_file
        self._read = lru_cache(maxsize=cache_size)(self._read_layers)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget every cached result; the next call re-reads all layers."""
        self._read.cache_clear()

    def _read_layers(self, profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=self.default_file,
            start_dir=start_dir,
        )


get_config = LayeredConfigLoader()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "LayeredConfigLoader",
    "get_config",
    "validate_profile",
]
