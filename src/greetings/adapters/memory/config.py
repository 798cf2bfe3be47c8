"""In-memory configuration for tests.

Nothing is read from disk: the configuration is whatever mapping the test
hands in, and the requested profile is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lib_layered_config import Config


def fixed_config_loader(data: Mapping[str, Any] | None = None) -> Callable[..., Config]:
    """Return a ``GetConfig`` that always yields a Config built from *data*.

    Example:
        >>> load = fixed_config_loader({"greetings": {"seed": 3}})
        >>> load(profile="staging").get("greetings.seed")
        3
    """
    config = Config(dict(data or {}), {})

    def _load(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config

    return _load


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty Config so every greeter setting takes its default."""
    return Config({}, {})


__all__ = [
    "fixed_config_loader",
    "get_config_in_memory",
]
