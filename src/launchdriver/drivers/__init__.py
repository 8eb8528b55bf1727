"""Driver registry.

Maps driver names (as used on the command line and in definition files) to
concrete Driver classes.
"""

from .base import Driver, bool_to_int
from .launchpad_mini_mk3 import Command, LaunchpadMiniMK3, Layout, LightingMode
from .schema import DeviceDefinition, SysExEnvelope

# Format: "DriverName": DriverClass
DRIVERS: dict[str, type[Driver]] = {}


def register_driver(name: str, driver_class: type[Driver]) -> None:
    """
    Register a driver class.

    Args:
        name: Driver name
        driver_class: Driver subclass (must accept an optional DeviceDefinition)
    """
    DRIVERS[name] = driver_class


def get_driver(name: str) -> type[Driver] | None:
    """
    Get driver class by name.

    Returns:
        Driver class or None if not registered
    """
    return DRIVERS.get(name)


def available_drivers() -> list[str]:
    """Names of all registered drivers, sorted."""
    return sorted(DRIVERS)


register_driver("LaunchpadMiniMK3", LaunchpadMiniMK3)

__all__ = [
    "DRIVERS",
    "Command",
    "DeviceDefinition",
    "Driver",
    "LaunchpadMiniMK3",
    "Layout",
    "LightingMode",
    "SysExEnvelope",
    "available_drivers",
    "bool_to_int",
    "get_driver",
    "register_driver",
]
