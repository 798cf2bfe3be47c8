"""Application layer: the ports greeting commands depend on.

Contents:
    * :mod:`.ports` - Callable Protocols for configuration, settings,
      randomness and logging
"""

from __future__ import annotations

from .ports import (
    CreateRandomSource,
    GetConfig,
    InitLogging,
    LoadGreeterSettingsFromDict,
)

__all__ = [
    "CreateRandomSource",
    "GetConfig",
    "InitLogging",
    "LoadGreeterSettingsFromDict",
]
