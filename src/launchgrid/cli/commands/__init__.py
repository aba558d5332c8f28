"""CLI commands for launchgrid."""

from .config import config_group
from .midi import midi_group
from .paint import paint

__all__ = ["config_group", "midi_group", "paint"]
