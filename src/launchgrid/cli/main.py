"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from launchgrid import __version__
from launchgrid.exceptions import ConfigurationError
from launchgrid.models import AppConfig
from launchgrid.models.config import DEFAULT_LOG_DIR

from .commands import config_group, midi_group, paint

logger = logging.getLogger(__name__)


def setup_logging(
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    log_dir: Optional[Path] = None,
) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
        log_dir: Directory for the rotating log file (default: ~/.launchgrid/logs)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "launchgrid-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_dir = log_dir or DEFAULT_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / "launchgrid.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    # Echo to stderr only when asked for, stdout is for command output
    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="launchgrid")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.launchgrid/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./launchgrid-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    launchgrid - drive a Launchpad-style MIDI grid controller.

    \b
    Examples:
      # List MIDI devices
      launchgrid midi list

      # Print pad and controller events
      launchgrid midi monitor

      # Paint on the pads
      launchgrid paint

      # Use a different config file
      launchgrid --config ./grid.json paint
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        config = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        # Raised again by load_config() in commands that need the config
        ctx.obj["config_error"] = e
        config = AppConfig()
    else:
        ctx.obj["config"] = config

    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level, config.log_dir)


cli.add_command(midi_group)
cli.add_command(config_group)
cli.add_command(paint)

if __name__ == "__main__":
    cli()
