"""Hand framed queries to a MIDI output.

Opening, choosing and closing ports is up to the caller; a transport only
sends what it is given.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

import mido

from launchdriver.drivers import Driver
from launchdriver.exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can deliver a framed query to a device."""

    def transmit(self, query: Sequence[int]) -> None:
        """Send one framed query."""
        ...


class MidoTransport:
    """Transport over an open mido output port."""

    def __init__(self, port: mido.ports.BaseOutput):
        """
        Initialize transport.

        Args:
            port: Open mido output port
        """
        self._port = port

    @property
    def port_name(self) -> str | None:
        return getattr(self._port, "name", None)

    def transmit(self, query: Sequence[int]) -> None:
        """
        Send a framed query as a SysEx message.

        Raises:
            MessageEncodingError: If the query is not valid SysEx
            TransportError: If the port fails to send
        """
        message = Driver.to_message(query)

        try:
            self._port.send(message)
        except (OSError, ValueError) as e:
            logger.error(f"Error sending SysEx to {self.port_name}: {e}")
            raise TransportError(
                user_message="Failed to send SysEx message",
                technical_message=f"Sending {list(query)} to {self.port_name} failed: {e}",
                port_name=self.port_name,
            ) from e

        logger.info(f"Sent {len(query)} byte SysEx message to {self.port_name}")
