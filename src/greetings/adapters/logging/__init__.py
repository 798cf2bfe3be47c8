"""Logging adapter: lib_log_rich runtime built from ``[lib_log_rich]``.

Contents:
    * :class:`.setup.LoggingConfigModel` - Validated logging section
    * :func:`.setup.init_logging` - Start the runtime once per process
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
