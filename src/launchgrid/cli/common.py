"""Helpers shared by CLI commands."""

import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import click

from launchgrid.exceptions import LaunchGridError, format_error_for_display
from launchgrid.models import AppConfig

logger = logging.getLogger(__name__)


def load_config(ctx: click.Context) -> AppConfig:
    """
    Config selected by the top-level --config option.

    The group loads it once at startup; an error from that load is raised
    here so only commands that need the config fail on it.
    """
    obj = ctx.obj or {}
    if "config_error" in obj:
        raise obj["config_error"]
    if "config" in obj:
        return obj["config"]

    path: Optional[Path] = obj.get("config_path")
    return AppConfig.load_or_default(path)


def exit_with_error(error: Exception) -> None:
    """Show a clean error message (no traceback) and exit with status 1."""
    logger.exception("Command failed")

    if isinstance(error, LaunchGridError):
        message = error.get_full_message()
    else:
        message, _ = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {message}", err=True)
    click.echo("=" * 70, err=True)
    click.echo("For logging options, run: launchgrid --help", err=True)
    sys.exit(1)


def wait_for_interrupt(poll: float = 0.1, stop: Optional[Callable[[], bool]] = None) -> None:
    """Block until Ctrl+C, or until stop() returns True."""
    try:
        while not (stop and stop()):
            time.sleep(poll)
    except KeyboardInterrupt:
        click.echo("\nStopping...")
