"""Subcommands attached to the root group.

Contents:
    * :mod:`.greet` - ``hello`` and ``hellos``
    * :mod:`.info` - ``info``
"""

from __future__ import annotations

from .greet import cli_hello, cli_hellos
from .info import cli_info

__all__ = ["cli_hello", "cli_hellos", "cli_info"]
