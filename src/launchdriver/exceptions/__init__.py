"""
Custom exception hierarchy for launchdriver.

## Exception Hierarchy

```
LaunchDriverError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── TransportError
    ├── MessageEncodingError
    └── PortUnavailableError
```

Query encoding never raises: parameter values are framed as given. Errors
surface when a device definition is loaded, or when a framed query is handed
to a MIDI port and turns out not to be valid SysEx.

### Example: Loading a Device Definition

```python
from launchdriver.drivers.schema import DeviceDefinition
from launchdriver.exceptions import ConfigurationError

try:
    definition = DeviceDefinition.from_json_file(path)
except ConfigurationError as e:
    print(e.get_full_message())
```
"""

from .base import LaunchDriverError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .transport import MessageEncodingError, PortUnavailableError, TransportError

__all__ = [
    # Base
    "LaunchDriverError",
    # Configuration
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Transport
    "TransportError",
    "MessageEncodingError",
    "PortUnavailableError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
