"""launchgrid: controller layer for grid-based MIDI surfaces."""

__version__ = "0.1.0"

from .devices import GridMapper, StatefulSurface, Surface
from .midi import SurfaceManager
from .models import GridCoordinate, SurfaceColor, color_name_of

__all__ = [
    "GridCoordinate",
    "GridMapper",
    "StatefulSurface",
    "Surface",
    "SurfaceColor",
    "SurfaceManager",
    "color_name_of",
]
