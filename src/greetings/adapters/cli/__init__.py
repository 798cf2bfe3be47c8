"""Click adapter: the ``greetings`` command line.

Contents:
    * :func:`.main.main` - Run the CLI and return an exit code
    * :data:`.root.cli` - Root group with ``hello``, ``hellos`` and ``info``
    * :class:`.context.CommandState` - State handed to subcommands
    * :class:`.exit_codes.ExitCode` - Exit statuses the commands use
"""

from __future__ import annotations

from .context import CommandState, TracebackState
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CommandState",
    "ExitCode",
    "TracebackState",
    "cli",
    "main",
]
