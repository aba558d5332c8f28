"""Paint: press a pad to light it in the selected color.

The controller row doubles as the color picker. Controller 0 clears the
surface, controllers 1-7 select a color and show it on their own LED.
"""

import logging
from collections.abc import Callable
from typing import Optional

from launchgrid.devices import StatefulSurface
from launchgrid.models import GridCoordinate, SurfaceColor

logger = logging.getLogger(__name__)

# Color selected by controllers 1-7, in order
COLOR_CONTROL_MAP: list[SurfaceColor] = [
    SurfaceColor.RED_HIGH,
    SurfaceColor.RED_LOW,
    SurfaceColor.AMBER_HIGH,
    SurfaceColor.AMBER_LOW,
    SurfaceColor.GREEN_HIGH,
    SurfaceColor.GREEN_LOW,
    SurfaceColor.OFF,
]

CLEAR_CONTROL = 0


class PaintHandler:
    """SurfaceHandler that turns the surface into a drawing canvas."""

    def __init__(
        self,
        active_color: SurfaceColor = SurfaceColor.RED_HIGH,
        on_status: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize paint handler.

        Args:
            active_color: Color used until another is picked
            on_status: Called with a short message when the canvas is
                       cleared or the color changes
        """
        self.active_color = active_color
        self._on_status = on_status

    def reset(self, surface: StatefulSurface) -> None:
        """Clear the canvas and draw the color picker."""
        surface.reset_colors()
        for offset, color in enumerate(COLOR_CONTROL_MAP):
            surface.set_controller_color(offset + 1, color)

    def handle_note(self, surface: StatefulSurface, coordinate: GridCoordinate, velocity: int) -> None:
        if velocity == 0:
            return
        surface.set_note_color(coordinate, self.active_color)

    def handle_control(self, surface: StatefulSurface, index: int, velocity: int) -> None:
        if velocity == 0:
            return

        if index == CLEAR_CONTROL:
            self.reset(surface)
            self._status("Cleared!")
            return

        if index - 1 >= len(COLOR_CONTROL_MAP):
            logger.debug(f"Controller {index} has no color assigned")
            return

        self.active_color = COLOR_CONTROL_MAP[index - 1]
        self._status(f"Current color: {self.active_color.display_name}")

    def _status(self, message: str) -> None:
        logger.info(message)
        if self._on_status:
            self._on_status(message)
