"""Run the CLI and turn every outcome into a process exit code.

Contents:
    * :func:`main` - Shared by the console script and ``python -m greetings``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetings import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from greetings.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code.

    The length limit follows the ``--traceback`` flag as it stands when the
    error surfaces, so a failure before the flag is parsed gets the summary.
    """
    state = TracebackState.capture()
    limit = TRACEBACK_VERBOSE_LIMIT if state.enabled else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=state.enabled, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # Click runs non-standalone so ctx.obj can carry the factory; lib_cli_exit_tools.run_cli has no hook for that.
    from .root import cli

    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_unexpected(exc)
    # ctx.exit(code) inside a command comes back as the return value.
    return outcome if isinstance(outcome, int) else 0


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; a worker shutting it down would silence the host process.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``greetings`` and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the lib_cli_exit_tools traceback flags back
            the way they were before the run.
        services_factory: Zero-argument callable returning
            :class:`~greetings.composition.AppServices`, usually
            ``build_production`` or ``build_testing``.

    Returns:
        ``0`` on success, ``2`` for usage errors, ``22`` for an empty name,
        ``78`` for invalid configuration, and the lib_cli_exit_tools mapping
        for anything unexpected.

    Raises:
        ValueError: *services_factory* was omitted.

    Example:
        >>> from greetings.composition import build_testing
        >>> main(["hello", "Ann", "--seed", "0"], services_factory=build_testing)  # doctest: +ELLIPSIS
        ...Ann...
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass build_production or build_testing")

    saved = TracebackState.capture()
    try:
        return _invoke(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            saved.apply()
        _shutdown_logging()


__all__ = ["main"]
