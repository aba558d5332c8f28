"""MIDI session management."""

from .manager import SurfaceManager

__all__ = ["SurfaceManager"]
