"""Surface events and the protocols that produce and consume them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from launchgrid.models import GridCoordinate

    from .surface import StatefulSurface


class SurfaceEvent:
    """Decoded surface input."""

    velocity: int

    @property
    def pressed(self) -> bool:
        """True for a press, False for a release."""
        return self.velocity > 0


class NoteEvent(SurfaceEvent):
    """A pad in the note grid was pressed or released."""

    def __init__(self, coordinate: GridCoordinate, velocity: int):
        self.coordinate = coordinate
        self.velocity = velocity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteEvent):
            return NotImplemented
        return self.coordinate == other.coordinate and self.velocity == other.velocity

    def __repr__(self) -> str:
        return f"NoteEvent(coordinate={self.coordinate}, velocity={self.velocity})"


class ControllerEvent(SurfaceEvent):
    """A controller button was pressed or released."""

    def __init__(self, index: int, velocity: int):
        self.index = index  # 0-8
        self.velocity = velocity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ControllerEvent):
            return NotImplemented
        return self.index == other.index and self.velocity == other.velocity

    def __repr__(self) -> str:
        return f"ControllerEvent(index={self.index}, velocity={self.velocity})"


class InputPort(Protocol):
    """Receiving endpoint. Matches mido input ports opened with a callback."""

    callback: object

    def close(self) -> None:
        ...


class OutputPort(Protocol):
    """Sending endpoint. Matches mido output ports."""

    def send(self, msg) -> None:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class SurfaceHandler(Protocol):
    """
    Reacts to surface input after the surface has recorded it.

    The surface updates its state before calling the handler, so a handler
    always sees the new velocity when it reads the state back. Handlers may
    call the surface's color setters from inside these methods.
    """

    def handle_note(self, surface: StatefulSurface, coordinate: GridCoordinate, velocity: int) -> None:
        """
        Handle a pad press or release.

        Args:
            surface: The surface that received the event
            coordinate: Pad that changed
            velocity: New velocity (0 = released)
        """
        ...

    def handle_control(self, surface: StatefulSurface, index: int, velocity: int) -> None:
        """
        Handle a controller button press or release.

        Args:
            surface: The surface that received the event
            index: Controller index (0-8)
            velocity: New velocity (0 = released)
        """
        ...
