"""launchdriver: SysEx message encoding for Launchpad grid controllers."""

__version__ = "0.1.0"

from .drivers import Command, DeviceDefinition, Driver, LaunchpadMiniMK3, Layout, LightingMode
from .transport import MidoTransport, Transport

__all__ = [
    "Command",
    "DeviceDefinition",
    "Driver",
    "LaunchpadMiniMK3",
    "Layout",
    "LightingMode",
    "MidoTransport",
    "Transport",
]
