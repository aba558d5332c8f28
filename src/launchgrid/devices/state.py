"""Last-known input and LED state of every surface cell."""

import numpy as np

from launchgrid.models import CONTROLLER_COUNT, GRID_HEIGHT, GRID_WIDTH, SurfaceColor


class SurfaceState:
    """
    Dense velocity and color tables for the pad grid and controller row.

    Velocities start at 0 and colors at Off. Cells are independent: writing
    one never changes another. Callers are expected to have validated the
    coordinate or index; the tables index directly.
    """

    def __init__(self):
        self.note_velocity = np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=np.uint8)
        self.note_color = np.full((GRID_HEIGHT, GRID_WIDTH), int(SurfaceColor.OFF), dtype=np.uint8)
        self.controller_velocity = np.zeros(CONTROLLER_COUNT, dtype=np.uint8)
        self.controller_color = np.full(CONTROLLER_COUNT, int(SurfaceColor.OFF), dtype=np.uint8)

    def clear_colors(self) -> None:
        """Set every color to Off."""
        self.note_color.fill(int(SurfaceColor.OFF))
        self.controller_color.fill(int(SurfaceColor.OFF))

    def copy(self) -> "SurfaceState":
        """Independent copy with all tables marked read-only."""
        snapshot = SurfaceState.__new__(SurfaceState)
        for name in ("note_velocity", "note_color", "controller_velocity", "controller_color"):
            table = getattr(self, name).copy()
            table.flags.writeable = False
            setattr(snapshot, name, table)
        return snapshot

    @property
    def pressed_notes(self) -> list[tuple[int, int]]:
        """(row, column) of every pad currently held down."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.note_velocity > 0)]

    @property
    def pressed_controllers(self) -> list[int]:
        """Index of every controller button currently held down."""
        return [int(i) for i in np.flatnonzero(self.controller_velocity)]
