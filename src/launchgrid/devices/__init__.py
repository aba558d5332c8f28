"""Grid surface core: codec, protocol adapter and stateful surface."""

from .input import SurfaceInput
from .mapper import GridMapper
from .output import SurfaceOutput
from .protocols import (
    ControllerEvent,
    InputPort,
    NoteEvent,
    OutputPort,
    SurfaceEvent,
    SurfaceHandler,
)
from .state import SurfaceState
from .surface import StatefulSurface, Surface

__all__ = [
    "ControllerEvent",
    "GridMapper",
    "InputPort",
    "NoteEvent",
    "OutputPort",
    "StatefulSurface",
    "Surface",
    "SurfaceEvent",
    "SurfaceHandler",
    "SurfaceInput",
    "SurfaceOutput",
    "SurfaceState",
]
