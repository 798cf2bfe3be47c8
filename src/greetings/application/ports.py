"""Application ports: the services a greeting command needs, as callable Protocols.

Every port is a Protocol with a single ``__call__``; plain module-level
functions and callable objects satisfy them structurally, so the production
adapters and the in-memory doubles are interchangeable.

Infrastructure types (``Config``, ``GreeterSettings``) are imported only for
type checking, keeping the application layer free of runtime adapter imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.behaviors import RandomSource

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.greeter.settings import GreeterSettings


class GetConfig(Protocol):
    """Return the merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadGreeterSettingsFromDict(Protocol):
    """Parse the ``greetings`` section of a configuration mapping."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreeterSettings: ...


class CreateRandomSource(Protocol):
    """Build the random source that picks greeting templates.

    ``seed=None`` asks for a non-reproducible source.
    """

    def __call__(self, seed: int | None = ...) -> RandomSource: ...


class InitLogging(Protocol):
    """Start the logging runtime from the loaded configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateRandomSource",
    "GetConfig",
    "InitLogging",
    "LoadGreeterSettingsFromDict",
]
