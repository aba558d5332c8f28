"""
MIDI input parsing for the surface.

Input Flow: Button Press → Your Code
=====================================

::

    Hardware Button Press
          ↓
    [MIDI Message: 0x90 0x23 0x40]
          ↓
    ┌──────────────────────────────────────┐
    │      SurfaceInput                    │
    │                                      │
    │  parse_message(msg):                 │
    │    status 0x90 → note                │
    │    mapper.key_to_grid(0x23)          │
    │    return NoteEvent((2, 3), 64)      │
    └────────────┬─────────────────────────┘
                 │ Uses mapper
                 ↓
    ┌──────────────────────────────────────┐
    │   GridMapper                         │
    │                                      │
    │  key_to_grid(35):                    │
    │    row 2 offset = 32                 │
    │    35 in [32, 40] → (2, 3)           │
    └──────────────────────────────────────┘
          ↓
    [NoteEvent(coordinate=(2, 3), velocity=64)]
          ↓
    StatefulSurface records it, then calls its handler

Velocity Handling
-----------------

Velocity (0-127) is preserved on the event. Note on with velocity 0 and
note off are both releases and decode to the same event with velocity 0.

Anything that does not address the surface (unknown status bytes, keys
between rows, control numbers outside the controller row, malformed
bytes) decodes to None. Decoding never raises.
"""

import logging
from typing import Optional

import mido

from launchgrid.models import SurfaceLayout

from .mapper import GridMapper
from .protocols import ControllerEvent, NoteEvent, SurfaceEvent

logger = logging.getLogger(__name__)


class SurfaceInput:
    """Parse surface MIDI input into surface events."""

    def __init__(self, mapper: Optional[GridMapper] = None):
        """
        Initialize input parser.

        Args:
            mapper: Key/control mapper (default: standard layout)
        """
        self.mapper = mapper or GridMapper()

    @property
    def layout(self) -> SurfaceLayout:
        return self.mapper.layout

    def parse_message(self, msg: mido.Message) -> Optional[SurfaceEvent]:
        """
        Parse incoming MIDI message into a surface event.

        Args:
            msg: MIDI message

        Returns:
            NoteEvent or ControllerEvent, or None if the message is ignored
        """
        data = msg.bytes()
        if len(data) != 3:
            return None

        return self._decode(data[0], data[1], data[2])

    def parse_bytes(self, data: bytes) -> Optional[SurfaceEvent]:
        """
        Parse a raw 3-byte message.

        Args:
            data: [status, data1, data2]

        Returns:
            NoteEvent or ControllerEvent, or None if the message is ignored
        """
        data = list(data)
        if len(data) != 3 or any(not 0 <= b <= 0xFF for b in data):
            logger.debug(f"Ignoring malformed message: {data}")
            return None
        if data[0] < 0x80 or data[1] > 0x7F or data[2] > 0x7F:
            logger.debug(f"Ignoring malformed message: {data}")
            return None

        return self._decode(data[0], data[1], data[2])

    def _decode(self, status: int, data1: int, data2: int) -> Optional[SurfaceEvent]:
        """Classify a channel message by its status nibble."""
        kind = status & 0xF0

        if kind == self.layout.note_on or kind == self.layout.note_off:
            coordinate = self.mapper.key_to_grid(data1)
            if coordinate is None:
                logger.debug(f"Ignoring note for non-pad key {data1}")
                return None

            velocity = data2 if kind == self.layout.note_on else 0
            return NoteEvent(coordinate, velocity)

        if kind == self.layout.control_change:
            index = self.mapper.control_to_index(data1)
            if index is None:
                logger.debug(f"Ignoring control change for control {data1}")
                return None
            return ControllerEvent(index, data2)

        return None
