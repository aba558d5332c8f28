"""Config command implementations."""

import click

from launchgrid.exceptions import LaunchGridError
from launchgrid.models import AppConfig

from ..common import exit_with_error, load_config


@click.group(name="config")
def config_group():
    """Configuration commands."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Print the active configuration as JSON."""
    try:
        config = load_config(ctx)
    except LaunchGridError as e:
        exit_with_error(e)
    click.echo(config.model_dump_json(indent=2))


@config_group.command(name="path")
@click.pass_context
def config_path(ctx):
    """Print the path of the configuration file."""
    path = (ctx.obj or {}).get("config_path") or AppConfig.default_path()
    click.echo(str(path))


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def init_config(ctx, force: bool):
    """Write the default configuration file."""
    path = (ctx.obj or {}).get("config_path") or AppConfig.default_path()
    if path.exists() and not force:
        click.echo(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        AppConfig().save(path)
    except LaunchGridError as e:
        exit_with_error(e)
    click.echo(f"Wrote default config to {path}")
