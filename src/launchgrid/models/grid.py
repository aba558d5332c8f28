"""Grid geometry and MIDI layout for the pad matrix."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Constants defined at module level for use in validators and default tables
GRID_HEIGHT = 8
GRID_WIDTH = 9
CONTROLLER_COUNT = 9

# Largest key/control number a MIDI data byte can carry
MAX_DATA_BYTE = 0x7F


class GridCoordinate(BaseModel):
    """
    (row, column) address of a pad cell.

    Rows run 0-7 top to bottom and columns 0-8 left to right. Column 8 is
    the round side button on each row, which the device addresses through
    the note space like any other pad.

    Unpacks like a tuple: ``row, column = coordinate``.
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=GRID_HEIGHT - 1, description="Row (0-7)")
    column: int = Field(ge=0, le=GRID_WIDTH - 1, description="Column (0-8)")

    def as_tuple(self) -> tuple[int, int]:
        """Return (row, column)."""
        return (self.row, self.column)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


def all_coordinates() -> list[GridCoordinate]:
    """Every addressable pad cell, row by row."""
    return [
        GridCoordinate(row=row, column=column)
        for row in range(GRID_HEIGHT)
        for column in range(GRID_WIDTH)
    ]


class SurfaceLayout(BaseModel):
    """
    MIDI constants describing how the surface is addressed.

    Immutable so one instance can be shared by the mapper, input and output
    of a surface without any of them changing it under the others. Bounds
    keep every key and control the layout can produce within a data byte.
    """

    model_config = ConfigDict(frozen=True)

    # Status bytes (channel nibble is ignored on input, channel 1 on output)
    note_on: int = Field(default=0x90, description="Note on status byte")
    note_off: int = Field(default=0x80, description="Note off status byte")
    control_change: int = Field(default=0xB0, description="Controller change status byte")

    # Addressing
    row_stride: int = Field(
        default=0x10,
        ge=GRID_WIDTH,
        le=(MAX_DATA_BYTE - (GRID_WIDTH - 1)) // (GRID_HEIGHT - 1),
        description="Key distance between rows",
    )
    controller_base: int = Field(
        default=0x68,
        ge=0,
        le=MAX_DATA_BYTE - (CONTROLLER_COUNT - 1),
        description="Control number of controller 0",
    )
    reset_control: int = Field(
        default=0x00, ge=0, le=MAX_DATA_BYTE, description="Control number that clears all LEDs"
    )

    @field_validator("note_on", "note_off", "control_change")
    @classmethod
    def validate_status(cls, v: int) -> int:
        """Channel voice status on channel 1 (0x80, 0x90, ... 0xE0)."""
        if not 0x80 <= v <= 0xE0 or v & 0x0F:
            raise ValueError("status byte must be a channel 1 voice status (0x80-0xE0, low nibble 0)")
        return v
