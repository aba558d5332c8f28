"""Surface addressing and color exceptions.

Raised by the encode path and the state accessors when a coordinate,
controller index or color falls outside what the device accepts. The
decode path never raises; it drops what it cannot address.
"""

from typing import Any

from .base import LaunchGridError


class SurfaceError(LaunchGridError):
    """Base class for surface addressing errors."""
    pass


class GridRangeError(SurfaceError):
    """Grid coordinate is outside the pad matrix."""

    def __init__(self, row: Any, column: Any, height: int = 8, width: int = 9):
        super().__init__(
            user_message=f"Grid coordinate ({row}, {column}) is out of range",
            technical_message=(
                f"Grid coordinate ({row}, {column}) outside rows 0-{height - 1}, "
                f"columns 0-{width - 1}"
            ),
            recoverable=True,
            recovery_hint=f"Use rows 0-{height - 1} and columns 0-{width - 1}",
        )
        self.row = row
        self.column = column


class ControllerIndexError(SurfaceError):
    """Controller button index is outside the controller row."""

    def __init__(self, index: Any, count: int = 9):
        super().__init__(
            user_message=f"Controller index {index} is out of range",
            technical_message=f"Controller index {index} outside 0-{count - 1}",
            recoverable=True,
            recovery_hint=f"Use controller indices 0-{count - 1}",
        )
        self.index = index


class UnknownColorError(SurfaceError):
    """Color value has no entry in the palette."""

    def __init__(self, value: Any):
        super().__init__(
            user_message=f"Unknown color value: {value!r}",
            technical_message=f"No palette entry for color value {value!r}",
            recoverable=True,
            recovery_hint="Use one of the SurfaceColor palette members",
        )
        self.value = value


class ColorValueError(SurfaceError):
    """Color cannot be sent as a MIDI data byte."""

    def __init__(self, value: Any):
        super().__init__(
            user_message=f"Color value {value!r} is not a valid MIDI data byte",
            technical_message=f"Color value {value!r} outside 0-127",
            recoverable=True,
            recovery_hint="Use a SurfaceColor member or an integer 0-127",
        )
        self.value = value


class VelocityError(SurfaceError):
    """Velocity cannot be recorded as a MIDI data byte."""

    def __init__(self, value: Any):
        super().__init__(
            user_message=f"Velocity {value!r} is out of range",
            technical_message=f"Velocity {value!r} outside 0-127",
            recoverable=True,
            recovery_hint="Velocities are integers 0-127 (0 = released)",
        )
        self.value = value
