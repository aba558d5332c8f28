"""Paint command: draw on the surface with the controller row as palette."""

import click

from launchgrid.exceptions import LaunchGridError
from launchgrid.midi import SurfaceManager
from launchgrid.models import SurfaceColor
from launchgrid.paint import PaintHandler

from ..common import exit_with_error, load_config, wait_for_interrupt


@click.command(name="paint")
@click.option(
    "--color",
    "-c",
    type=click.Choice([color.display_name for color in SurfaceColor], case_sensitive=False),
    default=SurfaceColor.RED_HIGH.display_name,
    help="Starting color (default: RedHigh)",
)
@click.pass_context
def paint(ctx, color: str):
    """
    Paint pads by pressing them.

    \b
    Controller 0 clears the surface.
    Controllers 1-7 pick a color.

    Press Ctrl+C to stop.
    """
    try:
        config = load_config(ctx)
        handler = PaintHandler(SurfaceColor.from_name(color), on_status=click.echo)

        with SurfaceManager(config) as manager:
            surface = manager.open(handler=handler)
            handler.reset(surface)
            click.echo("Ready!")
            wait_for_interrupt()
            surface.reset_colors()
    except LaunchGridError as e:
        exit_with_error(e)
