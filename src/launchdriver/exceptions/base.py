"""Root of the launchdriver error hierarchy.

Encoding a query never fails; errors come from the edges of the library:
reading a device definition, turning a query into a MIDI message, or
opening and writing an output port. Each error carries two messages, a
short one for the person at the command line and a detailed one for the
log, plus an optional hint on how to get the Launchpad talking again.
"""

from typing import Optional


class LaunchDriverError(Exception):
    """
    Base exception for definition and transport failures.

    Attributes:
        user_message: Short description printed by the CLI
        technical_message: Bytes, paths and backend errors for the log
        recoverable: True when fixing input or hardware and retrying can succeed
        recovery_hint: What to check (cable, port name, JSON file...)
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
