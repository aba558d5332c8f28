"""Mapping between MIDI key/control numbers and surface coordinates."""

from typing import Optional, Union

from launchgrid.exceptions import ControllerIndexError, GridRangeError, VelocityError
from launchgrid.models import (
    CONTROLLER_COUNT,
    GRID_HEIGHT,
    GRID_WIDTH,
    GridCoordinate,
    SurfaceLayout,
)


class GridMapper:
    """
    Bidirectional mapping between MIDI numbers and surface addresses.

    Pads are packed row by row into the key space with a fixed row stride:

    - key = row * 16 + column
    - row 0 uses keys 0-8, row 1 uses keys 16-24, ... row 7 uses keys 112-120
    - keys 9-15, 25-31, ... are not pads

    Controller buttons are addressed by control number:

    - control = 0x68 + index, index 0-8

    Decoding is partial and returns None for numbers that address nothing.
    Encoding validates its input and raises instead of producing bytes the
    device would misinterpret.
    """

    def __init__(self, layout: Optional[SurfaceLayout] = None):
        """
        Initialize mapper.

        Args:
            layout: MIDI layout of the surface (default: standard layout)
        """
        self.layout = layout or SurfaceLayout()

    def key_to_grid(self, key: int) -> Optional[GridCoordinate]:
        """
        Convert MIDI key to grid coordinate.

        Args:
            key: MIDI key number

        Returns:
            GridCoordinate, or None if the key is not a pad

        Example:
            key 0x23 → (2, 3)
            key 8 → (0, 8)
            key 9 → None
        """
        for row in range(GRID_HEIGHT):
            offset = row * self.layout.row_stride
            if offset <= key <= offset + (GRID_WIDTH - 1):
                return GridCoordinate(row=row, column=key - offset)
        return None

    def grid_to_key(self, coordinate: Union[GridCoordinate, tuple[int, int]]) -> int:
        """
        Convert grid coordinate to MIDI key.

        Raises:
            GridRangeError: If the coordinate is outside the grid
        """
        coordinate = self.to_coordinate(coordinate)
        return coordinate.row * self.layout.row_stride + coordinate.column

    def control_to_index(self, control: int) -> Optional[int]:
        """
        Convert MIDI control number to controller index.

        Returns:
            Controller index (0-8), or None if the control is not a controller button
        """
        index = control - self.layout.controller_base
        if not 0 <= index < CONTROLLER_COUNT:
            return None
        return index

    def index_to_control(self, index: int) -> int:
        """
        Convert controller index to MIDI control number.

        Raises:
            ControllerIndexError: If the index is not 0-8
        """
        return self.layout.controller_base + self.check_index(index)

    @staticmethod
    def to_coordinate(value: Union[GridCoordinate, tuple[int, int]]) -> GridCoordinate:
        """
        Normalize a coordinate or (row, column) tuple.

        Raises:
            GridRangeError: If the value does not address a pad
        """
        if isinstance(value, GridCoordinate):
            return value

        try:
            row, column = value
        except (TypeError, ValueError):
            raise GridRangeError(value, None, GRID_HEIGHT, GRID_WIDTH) from None

        if (
            isinstance(row, bool) or isinstance(column, bool)
            or not isinstance(row, int) or not isinstance(column, int)
            or not 0 <= row < GRID_HEIGHT
            or not 0 <= column < GRID_WIDTH
        ):
            raise GridRangeError(row, column, GRID_HEIGHT, GRID_WIDTH)

        return GridCoordinate(row=row, column=column)

    @staticmethod
    def check_index(index: int) -> int:
        """
        Validate a controller index.

        Raises:
            ControllerIndexError: If the index is not 0-8
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CONTROLLER_COUNT:
            raise ControllerIndexError(index, CONTROLLER_COUNT)
        return index

    @staticmethod
    def check_velocity(velocity: int) -> int:
        """
        Validate a velocity.

        Raises:
            VelocityError: If the velocity is not 0-127
        """
        if isinstance(velocity, bool) or not isinstance(velocity, int) or not 0 <= velocity <= 127:
            raise VelocityError(velocity)
        return velocity
