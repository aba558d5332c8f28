"""MIDI session manager: find the device, open its ports, build a surface."""

import asyncio
import logging
from collections.abc import Callable
from typing import Optional

import mido

from launchgrid.devices import StatefulSurface, Surface
from launchgrid.exceptions import DeviceNotFoundError, DevicePortError
from launchgrid.models import AppConfig

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[..., Surface]


class SurfaceManager:
    """
    Acquire one input and one output port for a surface.

    Acquisition is one-shot: ports are looked up once when open() is called
    and a missing device raises DeviceNotFoundError. There is no polling and
    no reconnection.

    Example:
        >>> with SurfaceManager(surface_factory=StatefulSurface) as manager:
        ...     surface = manager.open(handler=PaintHandler())
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        surface_factory: SurfaceFactory = StatefulSurface,
        port_selector: Optional[Callable[[list[str]], Optional[str]]] = None,
    ):
        """
        Initialize manager.

        Args:
            config: Application config with device pattern and port overrides
            surface_factory: Called as factory(input_port, output_port, layout=..., **kwargs)
            port_selector: Optional function to select best port from candidates.
                          If None, selects first matching port.
        """
        self.config = config or AppConfig()
        self._surface_factory = surface_factory
        self._port_selector = port_selector
        self._input: Optional[mido.ports.BaseInput] = None
        self._output: Optional[mido.ports.BaseOutput] = None
        self._surface: Optional[Surface] = None

    @staticmethod
    def list_ports() -> dict:
        """
        List all available MIDI ports.

        Returns:
            Dictionary with 'input' and 'output' lists of port names
        """
        return {
            'input': mido.get_input_names(),
            'output': mido.get_output_names()
        }

    def matches(self, port_name: str) -> bool:
        """Check if port name matches the configured device pattern."""
        return self.config.device_pattern in port_name

    def select_port(self, available: list[str], explicit: Optional[str]) -> Optional[str]:
        """
        Pick the port to open from the available names.

        An explicit name from the config must be present verbatim. Otherwise
        the ports matching the device pattern are offered to the selector.
        """
        if explicit is not None:
            return explicit if explicit in available else None

        matching_ports = [p for p in available if self.matches(p)]
        if not matching_ports:
            return None

        if self._port_selector:
            return self._port_selector(matching_ports)

        return matching_ports[0]

    def open(self, **surface_kwargs) -> Surface:
        """
        Open the device and build a surface bound to it.

        Args:
            **surface_kwargs: Extra arguments for the surface factory (e.g. handler)

        Returns:
            The surface, receiving input from now on

        Raises:
            DeviceNotFoundError: If no input or no output port matches
            DevicePortError: If a matching port cannot be opened
        """
        if self._surface is not None:
            logger.warning("SurfaceManager already open")
            return self._surface

        ports = self.list_ports()
        input_name = self.select_port(ports['input'], self.config.input_port)
        if input_name is None:
            raise DeviceNotFoundError(
                self.config.input_port or self.config.device_pattern, "input", ports['input']
            )

        output_name = self.select_port(ports['output'], self.config.output_port)
        if output_name is None:
            raise DeviceNotFoundError(
                self.config.output_port or self.config.device_pattern, "output", ports['output']
            )

        self._output = self._open_port(mido.open_output, output_name, "output")
        try:
            self._input = self._open_port(mido.open_input, input_name, "input")
        except DevicePortError:
            self._close_ports()
            raise

        try:
            self._surface = self._surface_factory(
                self._input, self._output, layout=self.config.layout, **surface_kwargs
            )
        except Exception as e:
            logger.error(f"Failed to create surface: {e}")
            self._close_ports()
            raise

        logger.info(f"Surface opened: input={input_name}, output={output_name}")
        return self._surface

    async def acquire(self, **surface_kwargs) -> Surface:
        """open() without blocking the event loop while ports are opened."""
        return await asyncio.to_thread(self.open, **surface_kwargs)

    def close(self) -> None:
        """Detach the surface and close both ports."""
        if self._surface is not None:
            self._surface.detach()
            self._surface = None
        self._close_ports()
        logger.info("Surface closed")

    @property
    def surface(self) -> Optional[Surface]:
        """The open surface, if any."""
        return self._surface

    @property
    def is_open(self) -> bool:
        return self._surface is not None

    def _open_port(self, opener: Callable, port_name: str, direction: str):
        try:
            port = opener(port_name)
        except Exception as e:
            logger.error(f"Failed to open MIDI {direction} {port_name}: {e}")
            raise DevicePortError(port_name, direction, str(e)) from e

        logger.debug(f"Opened MIDI {direction}: {port_name}")
        return port

    def _close_ports(self) -> None:
        for port in (self._input, self._output):
            if port is None:
                continue
            try:
                port.close()
            except Exception as e:
                logger.error(f"Error closing MIDI port {port}: {e}")
        self._input = None
        self._output = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
