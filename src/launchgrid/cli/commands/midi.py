"""MIDI command implementations."""

import logging
from datetime import datetime

import click

from launchgrid.devices import StatefulSurface
from launchgrid.exceptions import LaunchGridError
from launchgrid.midi import SurfaceManager
from launchgrid.models import GridCoordinate

from ..common import exit_with_error, load_config, wait_for_interrupt

logger = logging.getLogger(__name__)


class EchoHandler:
    """SurfaceHandler that prints every decoded event."""

    def handle_note(self, surface: StatefulSurface, coordinate: GridCoordinate, velocity: int) -> None:
        action = "pressed" if velocity else "released"
        click.echo(f"[{_timestamp()}] pad {coordinate} {action} (velocity {velocity})")

    def handle_control(self, surface: StatefulSurface, index: int, velocity: int) -> None:
        action = "pressed" if velocity else "released"
        click.echo(f"[{_timestamp()}] controller {index} {action} (velocity {velocity})")


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI ports."""
    ports = SurfaceManager.list_ports()

    click.echo("MIDI Input Ports:\n")
    if not ports["input"]:
        click.echo("  No MIDI input ports found.")
    else:
        for i, port in enumerate(ports["input"]):
            click.echo(f"  [{i}] {port}")

    click.echo("\nMIDI Output Ports:\n")
    if not ports["output"]:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports["output"]):
            click.echo(f"  [{i}] {port}")


@midi_group.command(name="monitor")
@click.pass_context
def monitor_midi(ctx):
    """
    Print pad and controller events from the surface.

    Only messages that address the surface are shown; everything else the
    device sends is ignored.

    Press Ctrl+C to stop monitoring.
    """
    try:
        config = load_config(ctx)
        with SurfaceManager(config) as manager:
            manager.open(handler=EchoHandler())
            click.echo(f"Monitoring '{config.device_pattern}' (Ctrl+C to stop)\n")
            wait_for_interrupt()
    except LaunchGridError as e:
        exit_with_error(e)
