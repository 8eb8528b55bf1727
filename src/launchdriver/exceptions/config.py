"""Configuration-related exceptions.

- ConfigurationError: Base class for device definition errors
- ConfigFileInvalidError: Definition file has invalid JSON syntax
- ConfigValidationError: Definition values fail validation
"""

from typing import Any, Optional

from .base import LaunchDriverError


class ConfigurationError(LaunchDriverError):
    """Device definition is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Definition file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid definition file
            parse_error: The parsing error message
        """
        user_msg = "Device definition file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Device definition file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Definition values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The definition field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the definition file (optional)
        """
        user_msg = f"Invalid device definition value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your device definition"
        if file_path:
            recovery += f"\nDefinition file: {file_path}"

        if "sysex" in field.lower():
            recovery += "\nThe header must start with 240 (0xF0) and the footer must be [247]"
        elif "midi" in field.lower():
            recovery += "\nUse the exact MIDI port name reported by your operating system"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Definition validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
