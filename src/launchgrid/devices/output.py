"""Surface output/LED control."""

import logging
from typing import Optional, Union

import mido

from launchgrid.models import GridCoordinate, SurfaceColor, SurfaceLayout, color_to_data

from .mapper import GridMapper
from .protocols import OutputPort

logger = logging.getLogger(__name__)


class SurfaceOutput:
    """
    Encode LED commands and send them to the output endpoint.

    Sends are fire-and-forget: the device does not acknowledge LED
    messages. Every command is validated before anything is sent, so an
    invalid coordinate, index or color raises and leaves the device untouched.
    """

    def __init__(self, port: OutputPort, mapper: Optional[GridMapper] = None):
        """
        Initialize output controller.

        Args:
            port: Output endpoint with a send(mido.Message) method
            mapper: Key/control mapper (default: standard layout)
        """
        self.port = port
        self.mapper = mapper or GridMapper()

    @property
    def layout(self) -> SurfaceLayout:
        return self.mapper.layout

    def reset(self) -> None:
        """Clear every LED on the device."""
        self._send(self.layout.control_change, self.layout.reset_control, 0)
        logger.debug("Sent LED reset")

    def set_note_color(
        self,
        coordinate: Union[GridCoordinate, tuple[int, int]],
        color: Union[SurfaceColor, int],
    ) -> None:
        """
        Light a pad.

        Args:
            coordinate: Pad to light
            color: Palette color or raw 7-bit color value

        Raises:
            GridRangeError: If the coordinate is outside the grid
            ColorValueError: If the color is not a 7-bit value
        """
        key = self.mapper.grid_to_key(coordinate)
        value = color_to_data(color)
        self._send(self.layout.note_on, key, value)
        logger.debug(f"Set pad {coordinate} (key {key}) to color {value:#04x}")

    def set_controller_color(self, index: int, color: Union[SurfaceColor, int]) -> None:
        """
        Light a controller button.

        Args:
            index: Controller index (0-8)
            color: Palette color or raw 7-bit color value

        Raises:
            ControllerIndexError: If the index is not 0-8
            ColorValueError: If the color is not a 7-bit value
        """
        control = self.mapper.index_to_control(index)
        value = color_to_data(color)
        self._send(self.layout.control_change, control, value)
        logger.debug(f"Set controller {index} (control {control:#04x}) to color {value:#04x}")

    def _send(self, status: int, data1: int, data2: int) -> None:
        """Build a channel message from the layout's status byte and send it."""
        msg = mido.Message.from_bytes([status, data1, data2])
        self.port.send(msg)
