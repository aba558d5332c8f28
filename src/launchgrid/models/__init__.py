"""Data models for launchgrid."""

from .color import SurfaceColor, color_from_value, color_name_of, color_to_data
from .config import AppConfig
from .grid import (
    CONTROLLER_COUNT,
    GRID_HEIGHT,
    GRID_WIDTH,
    GridCoordinate,
    SurfaceLayout,
    all_coordinates,
)

__all__ = [
    # Models
    "AppConfig",
    "GridCoordinate",
    "SurfaceColor",
    "SurfaceLayout",
    # Geometry
    "CONTROLLER_COUNT",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "all_coordinates",
    # Color helpers
    "color_from_value",
    "color_name_of",
    "color_to_data",
]
