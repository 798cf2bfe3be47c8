"""State shared between the root group and the greeting subcommands.

Contents:
    * :class:`TracebackState` - The two lib_cli_exit_tools traceback flags.
    * :class:`CommandState` - Services and merged configuration for one run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetings.composition import AppServices


@dataclass(frozen=True, slots=True)
class TracebackState:
    """Whether lib_cli_exit_tools prints full, coloured tracebacks.

    ``--traceback`` turns both flags on for the current run; :func:`main`
    captures the state first and puts it back afterwards so embedding code
    and tests see no lasting change.

    Attributes:
        enabled: Print the whole traceback instead of a one-line summary.
        force_color: Colour the traceback even when stderr is not a TTY.

    Example:
        >>> saved = TracebackState.capture()
        >>> TracebackState.from_flag(True).apply()
        >>> lib_cli_exit_tools.config.traceback
        True
        >>> saved.apply()
        >>> TracebackState.capture() == saved
        True
    """

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        """Read the flags currently set on ``lib_cli_exit_tools.config``."""
        cfg = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(cfg, "traceback", False)),
            force_color=bool(getattr(cfg, "traceback_force_color", False)),
        )

    @classmethod
    def from_flag(cls, enabled: bool) -> TracebackState:
        """State selected by the ``--traceback/--no-traceback`` option."""
        return cls(enabled=bool(enabled), force_color=bool(enabled))

    def apply(self) -> None:
        """Write both flags back to ``lib_cli_exit_tools.config``."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@dataclass(frozen=True, slots=True)
class CommandState:
    """What a greeting subcommand receives from the root group.

    The root group resolves configuration exactly once (profile plus
    ``--set`` overrides) and stores the result on ``ctx.obj``, replacing the
    services factory that was there before.

    Attributes:
        services: Adapters chosen by the composition root.
        config: Merged configuration with CLI overrides applied.
        traceback: Value of the ``--traceback`` flag.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from greetings.composition import build_testing
        >>> ctx = MagicMock()
        >>> state = CommandState(build_testing(), Config({}, {})).attach(ctx)
        >>> CommandState.from_context(ctx) is state
        True
    """

    services: AppServices
    config: Config
    traceback: bool = False

    def attach(self, ctx: click.Context) -> CommandState:
        """Store this state as ``ctx.obj`` and return it.

        Args:
            ctx: Context of the root group; subcommand contexts inherit
                ``obj`` from it.
        """
        ctx.obj = self
        return self

    @classmethod
    def from_context(cls, ctx: click.Context) -> CommandState:
        """Return the state the root group attached to *ctx*.

        Args:
            ctx: Context of the running subcommand.

        Raises:
            RuntimeError: The subcommand was invoked without going through
                the root group, so ``ctx.obj`` holds something else.

        Example:
            >>> from unittest.mock import MagicMock
            >>> CommandState.from_context(MagicMock(obj=None))
            Traceback (most recent call last):
            ...
            RuntimeError: greetings command state missing; invoke subcommands through the root group
        """
        if not isinstance(ctx.obj, cls):
            raise RuntimeError("greetings command state missing; invoke subcommands through the root group")
        return ctx.obj


__all__ = ["CommandState", "TracebackState"]
