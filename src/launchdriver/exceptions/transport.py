"""Transport-related exceptions.

- TransportError: Base class for failures while handing a query to MIDI output
- MessageEncodingError: Query cannot be represented as a MIDI SysEx message
- PortUnavailableError: Named MIDI output port could not be opened
"""

from collections.abc import Sequence
from typing import Optional

from .base import LaunchDriverError


class TransportError(LaunchDriverError):
    """A query could not be transmitted."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        port_name: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        """
        Initialize transport error.

        Args:
            user_message: Message to show to users
            technical_message: Detailed message for logs
            port_name: Name of the MIDI port involved (if known)
            recovery_hint: Suggestion for how to fix the issue
        """
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=True,
            recovery_hint=recovery_hint or "Check that the device is connected and the port is not in use",
        )
        self.port_name = port_name


class MessageEncodingError(TransportError):
    """Query bytes violate the SysEx wire format."""

    def __init__(self, query: Sequence[int], original_error: str):
        """
        Initialize message encoding error.

        Args:
            query: The query that was rejected
            original_error: Why the query was rejected
        """
        super().__init__(
            user_message="Query cannot be sent as a SysEx message",
            technical_message=f"Invalid SysEx query {list(query)}: {original_error}",
            recovery_hint=(
                "Send queries built by a driver: they start with 0xF0 and end with 0xF7.\n"
                "SysEx data bytes must be between 0 and 127.\n"
                "Check colour, brightness and speed values, and keep scrolling text to ASCII"
            ),
        )
        self.query = list(query)
        self.original_error = original_error


class PortUnavailableError(TransportError):
    """MIDI output port cannot be opened."""

    def __init__(
        self,
        port_name: str,
        original_error: Optional[str] = None,
        backend_missing: bool = False,
    ):
        """
        Initialize port unavailable error.

        Args:
            port_name: Name of the port that failed to open
            original_error: Error reported by the MIDI backend
            backend_missing: mido has no backend installed to open ports with
        """
        technical_msg = f"Cannot open MIDI output '{port_name}'"
        if original_error:
            technical_msg += f": {original_error}"

        if backend_missing:
            recovery = "No MIDI backend is installed. Run: pip install launchdriver[rtmidi]"
        else:
            recovery = (
                "Make sure the Launchpad is plugged in and no other application holds the port.\n"
                "Port names must match exactly, e.g. 'LPMiniMK3 MIDI'"
            )

        super().__init__(
            user_message=f"MIDI output port '{port_name}' is not available",
            technical_message=technical_msg,
            port_name=port_name,
            recovery_hint=recovery,
        )
        self.original_error = original_error
        self.backend_missing = backend_missing
