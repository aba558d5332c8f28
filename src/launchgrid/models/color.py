"""LED color palette for two-color (red/green) pad surfaces."""

from enum import IntEnum
from typing import Optional, Union

from launchgrid.exceptions import ColorValueError, UnknownColorError


class SurfaceColor(IntEnum):
    """
    Colors the device accepts as the data byte of a note or controller message.

    Bits 0-1 carry red intensity and bits 4-5 green intensity. Bits 2-3 are
    the copy/clear flags, set on every entry so the device writes both buffers.
    """

    OFF = 0x0C
    RED_LOW = 0x0D
    RED_HIGH = 0x0F
    AMBER_LOW = 0x1D
    AMBER_HIGH = 0x3F
    GREEN_LOW = 0x1C
    GREEN_HIGH = 0x3C

    @property
    def display_name(self) -> str:
        """Canonical palette name, e.g. "GreenHigh"."""
        return _NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "SurfaceColor":
        """
        Look up a color by its palette name.

        Accepts the canonical name ("AmberHigh") or the member name
        ("AMBER_HIGH"), case-insensitively.

        Raises:
            UnknownColorError: If no palette entry has that name
        """
        key = name.replace("_", "").replace("-", "").lower()
        for color, color_name in _NAMES.items():
            if color_name.lower() == key:
                return color
        raise UnknownColorError(name)


_NAMES: dict[SurfaceColor, str] = {
    SurfaceColor.OFF: "Off",
    SurfaceColor.RED_LOW: "RedLow",
    SurfaceColor.RED_HIGH: "RedHigh",
    SurfaceColor.AMBER_LOW: "AmberLow",
    SurfaceColor.AMBER_HIGH: "AmberHigh",
    SurfaceColor.GREEN_LOW: "GreenLow",
    SurfaceColor.GREEN_HIGH: "GreenHigh",
}

_BY_VALUE: dict[int, SurfaceColor] = {int(color): color for color in SurfaceColor}


def color_from_value(value: Optional[int]) -> SurfaceColor:
    """
    Reverse lookup of a palette entry from its MIDI value.

    Zero or None is treated as Off, matching what the device shows for an
    unlit cell.

    Raises:
        UnknownColorError: If the value is not in the palette
    """
    if not value:
        return SurfaceColor.OFF

    color = _BY_VALUE.get(value)
    if color is None:
        raise UnknownColorError(value)
    return color


def color_name_of(value: Optional[int]) -> str:
    """
    Palette name for a MIDI color value.

    Example:
        >>> color_name_of(0x3C)
        'GreenHigh'
        >>> color_name_of(0)
        'Off'
    """
    return color_from_value(value).display_name


def color_to_data(color: Union[SurfaceColor, int]) -> int:
    """
    Convert a color to the MIDI data byte that is sent to the device.

    Palette members are always valid. Plain integers are passed through so
    raw values outside the palette can still be tried on hardware, but they
    must fit in 7 bits.

    Raises:
        ColorValueError: If the value is not a valid data byte
    """
    if isinstance(color, bool) or not isinstance(color, int):
        raise ColorValueError(color)
    if not 0 <= color <= 127:
        raise ColorValueError(color)
    return int(color)
