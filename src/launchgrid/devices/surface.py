"""
Surface controllers bound to a pair of MIDI endpoints.

Surface is the stateless protocol adapter: it decodes everything arriving on
the input endpoint and encodes LED commands onto the output endpoint.
StatefulSurface adds the last-known velocity and color of every cell and
forwards input to an injected SurfaceHandler.

Usage Example
-------------

.. code-block:: python

    surface = StatefulSurface(input_port, output_port, handler=PaintHandler())
    surface.set_note_color((2, 3), SurfaceColor.GREEN_HIGH)
    surface.get_note_color((2, 3))  # SurfaceColor.GREEN_HIGH
"""

import logging
from typing import Optional, Union

import mido

from launchgrid.models import GridCoordinate, SurfaceColor, SurfaceLayout

from .input import SurfaceInput
from .mapper import GridMapper
from .output import SurfaceOutput
from .protocols import ControllerEvent, InputPort, NoteEvent, OutputPort, SurfaceEvent, SurfaceHandler
from .state import SurfaceState

logger = logging.getLogger(__name__)


class Surface:
    """
    Protocol adapter between MIDI endpoints and grid events.

    Incoming messages are decoded one at a time, in arrival order, and
    dispatched to on_note_event / on_controller_event. Subclasses override
    those two hooks; the base versions only classify press vs release.
    """

    def __init__(
        self,
        input_port: Optional[InputPort],
        output_port: OutputPort,
        layout: Optional[SurfaceLayout] = None,
    ):
        """
        Initialize surface.

        Args:
            input_port: Receiving endpoint; its callback is replaced with this
                        surface's handler. None for an output-only surface.
            output_port: Sending endpoint
            layout: MIDI layout of the device (default: standard layout)
        """
        self.mapper = GridMapper(layout)
        self.input = SurfaceInput(self.mapper)
        self.output = SurfaceOutput(output_port, self.mapper)
        self.input_port = input_port
        self.output_port = output_port

        if input_port is not None:
            input_port.callback = self._midi_callback

    @property
    def layout(self) -> SurfaceLayout:
        return self.mapper.layout

    # ================================================================
    # INPUT
    # ================================================================

    def handle_message(self, msg: mido.Message) -> Optional[SurfaceEvent]:
        """
        Decode a MIDI message and dispatch it.

        Returns:
            The decoded event, or None if the message was ignored
        """
        event = self.input.parse_message(msg)
        if event is not None:
            self.dispatch(event)
        return event

    def handle_bytes(self, data: bytes) -> Optional[SurfaceEvent]:
        """Decode a raw 3-byte message and dispatch it."""
        event = self.input.parse_bytes(data)
        if event is not None:
            self.dispatch(event)
        return event

    def dispatch(self, event: SurfaceEvent) -> bool:
        """
        Route a decoded event to the matching hook.

        Returns:
            True for a press, False for a release
        """
        if isinstance(event, NoteEvent):
            logger.debug(f"Note {event.coordinate} velocity {event.velocity}")
            return self.on_note_event(event.coordinate, event.velocity)
        if isinstance(event, ControllerEvent):
            logger.debug(f"Controller {event.index} velocity {event.velocity}")
            return self.on_controller_event(event.index, event.velocity)
        raise TypeError(f"Unsupported surface event: {event!r}")

    def on_note_event(self, coordinate: GridCoordinate, velocity: int) -> bool:
        """Pad pressed or released. Returns True for a press."""
        return velocity > 0

    def on_controller_event(self, index: int, velocity: int) -> bool:
        """Controller button pressed or released. Returns True for a press."""
        return velocity > 0

    def _midi_callback(self, msg: mido.Message) -> None:
        """
        Input endpoint callback - called from mido's internal I/O thread.

        Errors are logged here because there is no caller to propagate to.
        """
        try:
            self.handle_message(msg)
        except Exception as e:
            logger.error(f"Error handling surface message {msg}: {e}")

    def detach(self) -> None:
        """Stop receiving from the input endpoint."""
        if self.input_port is not None:
            self.input_port.callback = None

    # ================================================================
    # LED CONTROL
    # ================================================================

    def reset_colors(self) -> None:
        """Turn every LED off."""
        self.output.reset()

    def set_note_color(
        self,
        coordinate: Union[GridCoordinate, tuple[int, int]],
        color: Union[SurfaceColor, int],
    ) -> None:
        """Light a pad."""
        self.output.set_note_color(coordinate, color)

    def set_controller_color(self, index: int, color: Union[SurfaceColor, int]) -> None:
        """Light a controller button."""
        self.output.set_controller_color(index, color)


class StatefulSurface(Surface):
    """
    Surface that remembers the last velocity and color of every cell.

    Input is recorded before the handler sees it, and colors are recorded
    after they are sent. Reads of out-of-range cells raise GridRangeError
    or ControllerIndexError, and velocities outside 0-127 raise
    VelocityError before anything is recorded.

    reset_colors() clears the color tables along with the device, so the
    recorded colors always match what the device was last told to show.
    """

    def __init__(
        self,
        input_port: Optional[InputPort],
        output_port: OutputPort,
        layout: Optional[SurfaceLayout] = None,
        handler: Optional[SurfaceHandler] = None,
    ):
        """
        Initialize stateful surface.

        Args:
            input_port: Receiving endpoint (None for output-only)
            output_port: Sending endpoint
            layout: MIDI layout of the device (default: standard layout)
            handler: Optional handler called after each input is recorded
        """
        self.state = SurfaceState()
        self.handler = handler
        super().__init__(input_port, output_port, layout)

    def on_note_event(self, coordinate: GridCoordinate, velocity: int) -> bool:
        """Record the pad's velocity, then notify the handler."""
        coordinate = self.mapper.to_coordinate(coordinate)
        velocity = self.mapper.check_velocity(velocity)
        self.state.note_velocity[coordinate.row, coordinate.column] = velocity
        pressed = super().on_note_event(coordinate, velocity)

        if self.handler is not None:
            self.handler.handle_note(self, coordinate, velocity)
        return pressed

    def on_controller_event(self, index: int, velocity: int) -> bool:
        """Record the controller's velocity, then notify the handler."""
        index = self.mapper.check_index(index)
        velocity = self.mapper.check_velocity(velocity)
        self.state.controller_velocity[index] = velocity
        pressed = super().on_controller_event(index, velocity)

        if self.handler is not None:
            self.handler.handle_control(self, index, velocity)
        return pressed

    def reset_colors(self) -> None:
        """Turn every LED off and forget the recorded colors."""
        super().reset_colors()
        self.state.clear_colors()

    def set_note_color(
        self,
        coordinate: Union[GridCoordinate, tuple[int, int]],
        color: Union[SurfaceColor, int],
    ) -> None:
        """Light a pad and record its color."""
        coordinate = self.mapper.to_coordinate(coordinate)
        super().set_note_color(coordinate, color)
        self.state.note_color[coordinate.row, coordinate.column] = int(color)

    def set_controller_color(self, index: int, color: Union[SurfaceColor, int]) -> None:
        """Light a controller button and record its color."""
        super().set_controller_color(index, color)
        self.state.controller_color[index] = int(color)

    def get_note_velocity(self, coordinate: Union[GridCoordinate, tuple[int, int]]) -> int:
        """Last velocity received for a pad (0 = released)."""
        coordinate = self.mapper.to_coordinate(coordinate)
        return int(self.state.note_velocity[coordinate.row, coordinate.column])

    def get_note_color(self, coordinate: Union[GridCoordinate, tuple[int, int]]) -> Union[SurfaceColor, int]:
        """
        Last color sent to a pad.

        Returns:
            Palette color, or the raw value if a non-palette color was sent
        """
        coordinate = self.mapper.to_coordinate(coordinate)
        return _as_color(self.state.note_color[coordinate.row, coordinate.column])

    def get_controller_velocity(self, index: int) -> int:
        """Last velocity received for a controller button (0 = released)."""
        return int(self.state.controller_velocity[self.mapper.check_index(index)])

    def get_controller_color(self, index: int) -> Union[SurfaceColor, int]:
        """Last color sent to a controller button."""
        return _as_color(self.state.controller_color[self.mapper.check_index(index)])

    def snapshot(self) -> SurfaceState:
        """Read-only copy of the current state."""
        return self.state.copy()


def _as_color(value) -> Union[SurfaceColor, int]:
    value = int(value)
    try:
        return SurfaceColor(value)
    except ValueError:
        return value
