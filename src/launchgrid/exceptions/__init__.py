"""
Custom exception hierarchy for launchgrid.

## Exception Hierarchy

```
LaunchGridError (base)
├── SurfaceError
│   ├── GridRangeError
│   ├── ControllerIndexError
│   ├── UnknownColorError
│   ├── ColorValueError
│   └── VelocityError
├── DeviceError
│   ├── DeviceNotFoundError
│   └── DevicePortError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions carry a `user_message`, a `technical_message` for
logs, a `recoverable` flag and an optional `recovery_hint`.

### Example: Device Not Found

```python
from launchgrid.exceptions import DeviceNotFoundError

raise DeviceNotFoundError(pattern="Launchpad", direction="input")

# User sees: "No MIDI input device matching 'Launchpad' was found"
# Recovery hint: "Check that the device is plugged in... Run 'launchgrid midi list'..."
```
"""

from .base import LaunchGridError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import DeviceError, DeviceNotFoundError, DevicePortError
from .handlers import format_error_for_display, wrap_pydantic_error
from .surface import (
    ColorValueError,
    ControllerIndexError,
    GridRangeError,
    SurfaceError,
    UnknownColorError,
    VelocityError,
)

__all__ = [
    # Base
    "LaunchGridError",
    # Surface
    "ColorValueError",
    "ControllerIndexError",
    "GridRangeError",
    "SurfaceError",
    "UnknownColorError",
    "VelocityError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "DevicePortError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
