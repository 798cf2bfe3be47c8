"""In-memory logging adapter for testing."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from greetings import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a silent lib_log_rich runtime so ``bind`` scopes work.

    The configuration is ignored; nothing is written to the console and the
    stdlib bridge is not attached.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
