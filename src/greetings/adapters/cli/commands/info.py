"""``greetings info``: package metadata and the greeter settings in effect."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetings import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CommandState
from ._shared import load_settings

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Show version details and the greeter settings after every config layer and --set."""
    state = CommandState.from_context(ctx)
    settings = load_settings(ctx, state)

    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Showing package information")
        __init__conf__.print_info()
        click.echo("")
        click.echo("Greeter settings:")
        click.echo(f"    default_name  = {settings.default_name}")
        click.echo(f"    default_names = {', '.join(settings.default_names)}")
        click.echo(f"    templates     = {len(settings.templates)}")
        click.echo(f"    seed          = {'random' if settings.seed is None else settings.seed}")


__all__ = ["cli_info"]
