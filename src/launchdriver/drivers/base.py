"""
Driver contract and SysEx query framing.

Query Framing
=============

Every driver operation boils down to a command byte followed by parameter
bytes. The driver wraps that body in the device's SysEx envelope::

    query_builder([7, 0, 7, 0, 5, 72, 105])
          ↓
    [240, 0, 32, 41, 2, 13,   7, 0, 7, 0, 5, 72, 105,   247]
     └──────── header ────┘   └────── body ───────┘    footer

The framing step never inspects the body. Values outside the 7-bit SysEx
data range are framed as given; they are only rejected once the query is
turned into a ``mido.Message`` for sending (see ``to_message``).

Queries are plain lists of ints, built fresh on every call, so drivers hold
no mutable state and can be shared freely between threads.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

import mido

from launchdriver.exceptions import MessageEncodingError

from .schema import SYSEX_END, SYSEX_START, DeviceDefinition

logger = logging.getLogger(__name__)


def bool_to_int(value: bool) -> int:
    """Encode a flag as a data byte: True -> 1, False -> 0."""
    return 1 if value else 0


class Driver(ABC):
    """Base class for SysEx device drivers."""

    @property
    @abstractmethod
    def definition(self) -> DeviceDefinition:
        """Device identity and SysEx envelope."""
        ...

    @property
    def device_name(self) -> str:
        return self.definition.device_name

    @property
    def midi_in(self) -> str:
        return self.definition.midi_in

    @property
    def midi_out(self) -> str:
        return self.definition.midi_out

    def query_builder(self, query: Sequence[int]) -> list[int]:
        """
        Frame a query body with the SysEx header and footer.

        Args:
            query: Command byte followed by its parameter bytes

        Returns:
            header + query + footer, as a new list
        """
        sysex = self.definition.sysex
        framed = [*sysex.header, *query, *sysex.footer]
        logger.debug(f"{self.device_name} query: {framed}")
        return framed

    def build_query(self, opcode: int, parameters: Iterable[int] = ()) -> list[int]:
        """
        Frame a command and its parameters.

        Args:
            opcode: Command byte
            parameters: Parameter bytes, echoed verbatim

        Returns:
            header + [opcode] + parameters + footer
        """
        return self.query_builder([int(opcode), *parameters])

    @staticmethod
    def to_message(query: Sequence[int]) -> mido.Message:
        """
        Convert a framed query into a mido SysEx message.

        mido stores SysEx data without the 0xF0/0xF7 markers, so the first
        and last bytes of the query are dropped.

        Raises:
            MessageEncodingError: If the query lacks the 0xF0/0xF7 markers
                or a data byte is outside 0-127
        """
        if len(query) < 2 or query[0] != SYSEX_START or query[-1] != SYSEX_END:
            raise MessageEncodingError(query, "query is not framed by 0xF0 ... 0xF7")

        try:
            return mido.Message("sysex", data=[int(byte) for byte in query[1:-1]])
        except (TypeError, ValueError) as e:
            raise MessageEncodingError(query, str(e)) from e
