"""Greeting commands.

Contents:
    * :func:`cli_hello` - Greet a single name.
    * :func:`cli_hellos` - Greet several names at once.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from greetings.domain.enums import OutputFormat
from greetings.domain.errors import EmptyNameError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CommandState
from ..exit_codes import ExitCode
from ._shared import build_greeter, fail, load_settings

logger = logging.getLogger(__name__)

_SEED_HELP = "Seed template selection for reproducible output (overrides greetings.seed)"


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option("--seed", type=int, default=None, help=_SEED_HELP)
@click.pass_context
def cli_hello(ctx: click.Context, name: str | None, seed: int | None) -> None:
    """Print a greeting for NAME (default: greetings.default_name).

    An empty NAME is rejected with ``greetings: empty name`` and exit code 22.
    """
    state = CommandState.from_context(ctx)
    settings = load_settings(ctx, state)
    target = settings.default_name if name is None else name

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        greeter = build_greeter(ctx, state, settings, seed)
        try:
            message = greeter.greet(target)
        except EmptyNameError as exc:
            logger.info("Greeting rejected", extra={"reason": str(exc)})
            fail(ctx, str(exc), ExitCode.INVALID_ARGUMENT)
        logger.info("Greeted", extra={"person": target})
        click.echo(message)


@click.command("hellos", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1)
@click.option("--seed", type=int, default=None, help=_SEED_HELP)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (one 'name: greeting' line per name, or a JSON object)",
)
@click.pass_context
def cli_hellos(ctx: click.Context, names: tuple[str, ...], seed: int | None, output_format: str) -> None:
    """Print a greeting for each of NAMES (default: greetings.default_names).

    Duplicate names are greeted once. If any name is empty nothing is
    printed and the command exits with code 22.
    """
    state = CommandState.from_context(ctx)
    settings = load_settings(ctx, state)
    targets = names or settings.default_names
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-hellos", extra={"command": "hellos", "format": fmt.value}):
        greeter = build_greeter(ctx, state, settings, seed)
        try:
            messages = greeter.greet_many(targets)
        except EmptyNameError as exc:
            logger.info("Greetings rejected", extra={"reason": str(exc), "count": len(targets)})
            fail(ctx, str(exc), ExitCode.INVALID_ARGUMENT)
        logger.info("Greeted", extra={"count": len(messages)})

        if fmt is OutputFormat.JSON:
            click.echo(orjson.dumps(messages, option=orjson.OPT_INDENT_2).decode())
            return
        for who, message in messages.items():
            click.echo(f"{who}: {message}")


__all__ = ["cli_hello", "cli_hellos"]
