"""The ``greetings`` command group.

Global options are handled here once, before any subcommand runs:
configuration is read for ``--profile``, ``--set`` values are layered on
top, logging is started from the result, and ``--traceback`` is mirrored
into lib_cli_exit_tools.

Contents:
    * :func:`cli` - Root group; ``hello``, ``hellos`` and ``info`` hang off it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greetings import __init__conf__
from greetings.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CommandState, TracebackState

if TYPE_CHECKING:
    from greetings.composition import AppServices


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Read the layered configuration, reporting a bad profile as an option error.

    Args:
        services: Supplies the ``get_config`` port.
        profile: Value of ``--profile``; ``None`` reads the unprofiled layers.

    Raises:
        click.BadParameter: *profile* is empty, too long or contains path
            separators. Click prints it as a usage error and exits with 2.
    """
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Layer the ``--set SECTION.KEY=VALUE`` options over *config*.

    Overrides are applied left to right, so a later ``--set`` for the same
    key wins. Values are parsed as JSON where possible (``42``, ``true``,
    ``["Ann", "Bo"]``) and kept as plain strings otherwise.

    Args:
        config: Configuration returned by the ``get_config`` port.
        set_overrides: Raw option values in command-line order.

    Returns:
        A new Config; *config* itself is left untouched. With no overrides
        the original object is returned.

    Raises:
        click.UsageError: An entry has no ``=``, no dotted section, or walks
            into a value that is not a table. Exit code 2, nothing on stdout.

    Example:
        >>> base = Config({"greetings": {"seed": 1}}, {})
        >>> _apply_cli_overrides(base, ("greetings.seed=7",)).get("greetings.seed")
        7
        >>> _apply_cli_overrides(base, ("seed=7",))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        click.exceptions.UsageError: Invalid override 'seed=7': key must contain at least one dot (SECTION.KEY)
    """
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback for unexpected errors",
)
@click.option(
    "--profile",
    default=None,
    help="Also read configuration from profile/<NAME>/ in each layer",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. greetings.seed=42 (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and logging, then dispatch to a subcommand.

    ``ctx.obj`` arrives holding the services factory passed to
    :func:`~greetings.adapters.cli.main.main` and leaves holding a
    :class:`CommandState`. Without a subcommand the help text is printed.

    Example:
        >>> from click.testing import CliRunner
        >>> from greetings.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["hello", "Gladys"], obj=build_testing)
        >>> result.exit_code
        0
        >>> "Gladys" in result.output
        True
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("greetings was started without a services factory")
    services: AppServices = factory()

    config = _apply_cli_overrides(_load_config(services, profile), set_overrides)
    services.init_logging(config)
    CommandState(services=services, config=config, traceback=traceback).attach(ctx)
    TracebackState.from_flag(traceback).apply()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Command modules import this package, so they are attached after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_hello, cli_hellos, cli_info

    for command in (cli_hello, cli_hellos, cli_info):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
