"""Example: light every pad and echo presses back as green.

This example demonstrates:
- Opening the first Launchpad found with SurfaceManager
- Writing colors through a StatefulSurface
- Reacting to input with a handler
"""

import logging
import time

from launchgrid.devices import StatefulSurface
from launchgrid.midi import SurfaceManager
from launchgrid.models import GridCoordinate, SurfaceColor, all_coordinates

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


class GreenOnPress:
    """Turn a pad green while held, amber once released."""

    def handle_note(self, surface: StatefulSurface, coordinate: GridCoordinate, velocity: int) -> None:
        color = SurfaceColor.GREEN_HIGH if velocity else SurfaceColor.AMBER_LOW
        surface.set_note_color(coordinate, color)

    def handle_control(self, surface: StatefulSurface, index: int, velocity: int) -> None:
        logger.info(f"Controller {index} velocity {velocity}")


def main():
    """Run the example until Ctrl+C."""
    with SurfaceManager() as manager:
        surface = manager.open(handler=GreenOnPress())
        surface.reset_colors()

        for coordinate in all_coordinates():
            surface.set_note_color(coordinate, SurfaceColor.RED_LOW)

        logger.info("Press pads, Ctrl+C to quit")
        try:
            while True:
                time.sleep(0.1)
        except KeyboardInterrupt:
            pass
        finally:
            surface.reset_colors()


if __name__ == "__main__":
    main()
