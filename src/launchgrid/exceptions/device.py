"""MIDI device exceptions.

- DeviceError: Base class for device errors
- DeviceNotFoundError: No matching input or output port
- DevicePortError: A matching port exists but cannot be opened
"""

from typing import Optional

from .base import LaunchGridError


class DeviceError(LaunchGridError):
    """MIDI device problem."""
    pass


class DeviceNotFoundError(DeviceError):
    """No MIDI port matches the target device."""

    def __init__(self, pattern: str, direction: str, available: Optional[list[str]] = None):
        """
        Initialize device not found error.

        Args:
            pattern: Port name substring that was searched for
            direction: "input" or "output"
            available: Port names that were available at the time
        """
        available = available or []
        technical = f"No MIDI {direction} port matching '{pattern}'"
        if available:
            technical += f" (available: {', '.join(available)})"

        super().__init__(
            user_message=f"No MIDI {direction} device matching '{pattern}' was found",
            technical_message=technical,
            recoverable=True,
            recovery_hint=(
                "Check that the device is plugged in and powered on\n"
                "Run 'launchgrid midi list' to see available MIDI ports"
            ),
        )
        self.pattern = pattern
        self.direction = direction
        self.available = available


class DevicePortError(DeviceError):
    """A MIDI port could not be opened."""

    def __init__(self, port_name: str, direction: str, original_error: Optional[str] = None):
        """
        Initialize device port error.

        Args:
            port_name: Name of the port that failed to open
            direction: "input" or "output"
            original_error: Message from the MIDI backend
        """
        technical = f"Failed to open MIDI {direction} port '{port_name}'"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message=f"Could not open MIDI {direction} port '{port_name}'",
            technical_message=technical,
            recoverable=True,
            recovery_hint="Close other applications that may be using the device and try again",
        )
        self.port_name = port_name
        self.direction = direction
        self.original_error = original_error
