"""Helpers shared by the greeting commands.

Contents:
    * :func:`load_settings` - Validate the ``greetings`` section or exit 78.
    * :func:`build_greeter` - Wire a Greeter from settings and services.
    * :func:`describe_validation_error` - One-line summary of a pydantic error.
    * :func:`fail` - Report an error with the fixed prefix and exit.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import rich_click as click
from pydantic import ValidationError

from greetings.adapters.greeter.settings import GreeterSettings
from greetings.domain.behaviors import Greeter
from greetings.domain.errors import ConfigurationError

from ..constants import ERROR_PREFIX
from ..context import CommandState
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, message: str, exit_code: ExitCode) -> NoReturn:
    """Write ``greetings: <message>`` to stderr and end the command.

    This is the only line a failing command writes to stderr; anything the
    command logs on the way out stays below the console level.

    Args:
        ctx: Click context of the running command.
        message: Single-line description of the problem.
        exit_code: Non-zero status the process exits with.
    """
    click.echo(f"{ERROR_PREFIX}{message}", err=True)
    ctx.exit(int(exit_code))


def describe_validation_error(exc: ValidationError, section: str = "greetings") -> str:
    """Summarise the first problem in *exc* as ``invalid <section>.<field>: <msg>``.

    Example:
        >>> try:
        ...     GreeterSettings.model_validate({"seed": "abc"})
        ... except ValidationError as exc:
        ...     describe_validation_error(exc)
        'invalid greetings.seed: Input should be a valid integer, unable to parse string as an integer'
    """
    first = exc.errors(include_url=False)[0]
    location = ".".join(str(part) for part in (section, *first["loc"]))
    return f"invalid {location}: {first['msg']}"


def load_settings(ctx: click.Context, state: CommandState) -> GreeterSettings:
    """Parse the ``greetings`` section, exiting with CONFIG_ERROR when invalid."""
    try:
        return state.services.load_greeter_settings_from_dict(state.config.as_dict())
    except ValidationError as exc:
        message = describe_validation_error(exc)
        logger.info("Greeter settings rejected", extra={"reason": message, "errors": exc.error_count()})
        fail(ctx, message, ExitCode.CONFIG_ERROR)


def build_greeter(ctx: click.Context, state: CommandState, settings: GreeterSettings, seed: int | None) -> Greeter:
    """Create a Greeter from *settings*; an explicit *seed* beats the configured one."""
    effective_seed = seed if seed is not None else settings.seed
    try:
        templates = settings.to_templates()
    except ConfigurationError as exc:
        logger.info("Greeting templates rejected", extra={"reason": str(exc)})
        fail(ctx, str(exc), ExitCode.CONFIG_ERROR)
    logger.debug("Greeter ready", extra={"templates": len(templates), "seeded": effective_seed is not None})
    return Greeter(state.services.create_random_source(effective_seed), templates)


__all__ = ["build_greeter", "describe_validation_error", "fail", "load_settings"]
