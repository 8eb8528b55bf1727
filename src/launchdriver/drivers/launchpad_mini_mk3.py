"""
Driver for the Novation Launchpad Mini MK3.

SysEx Commands
--------------

Every message shares the same envelope::

    [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0D, <command>, <parameters...>, 0xF7]
     │     └──────┬──────┘  │    │
     │         Novation     │    └─ Model ID (0x0D = Mini MK3)
     Start of SysEx         └─ Launchpad device family

The Mini MK3 understands these commands:

- **0x00**: Select layout
- **0x03**: LED lighting
- **0x07**: Text scrolling
- **0x08**: LED brightness
- **0x09**: LED sleep
- **0x0E**: Programmer mode
- **0x10**: DAW mode
- **0x12**: DAW clear
- **0x14**: Session colour (reserved, not exposed)

Example: Scroll "Hi"
--------------------

::

    text_scrolling(5, "Hi")
          ↓
    [0xF0, 0, 32, 41, 2, 13, 7, 0, 7, 0, 5, 72, 105, 0xF7]
                             │  │  │  │  │  └──┬──┘
                             │  │  │  │  │     └─ UTF-8 text
                             │  │  │  │  └─ Palette colour
                             │  │  │  └─ Reserved
                             │  │  └─ Speed
                             │  └─ Loop (0 = once)
                             └─ Text scrolling command

LED Sleep Polarity
------------------

The device's sleep parameter is an "awake" flag: 1 lights the surface,
0 turns it off. ``led_sleep(sleep=True)`` therefore sends 0.

References
----------

- Launchpad Mini MK3 Programmer's Reference Manual
"""

from collections.abc import Iterable, Sequence
from enum import IntEnum

from .base import Driver, bool_to_int
from .schema import DeviceDefinition, SysExEnvelope


class Command(IntEnum):
    """SysEx command bytes."""

    SELECT_LAYOUT = 0
    LED_LIGHTNING = 3
    TEXT_SCROLLING = 7
    LED_BRIGHTNESS = 8
    LED_SLEEP = 9
    PROGRAMMER = 14
    DAW = 16
    DAW_CLEAR = 18
    SESSION_COLOR = 20


class Layout(IntEnum):
    """Selectable layouts."""

    SESSION = 0
    CUSTOM1 = 4
    CUSTOM2 = 5
    CUSTOM3 = 6
    DAW_FADER = 13
    PROGRAMMER = 127


class LightingMode(IntEnum):
    """LED lighting types inside an LED lightning payload."""

    STATIC = 0  # Palette colour
    FLASHING = 1  # Flashing between two palette colours
    PULSING = 2  # Pulsing palette colour
    RGB = 3  # Direct RGB colour


MINI_MK3_DEFINITION = DeviceDefinition(
    device_name="Launchpad Mini MK3",
    midi_in="LPMiniMK3 MIDI",
    midi_out="LPMiniMK3 MIDI",
    sysex=SysExEnvelope(header=(240, 0, 32, 41, 2, 13), footer=(247,)),
)


class LaunchpadMiniMK3(Driver):
    """SysEx query builder for the Launchpad Mini MK3."""

    def __init__(self, definition: DeviceDefinition | None = None):
        """
        Initialize driver.

        Args:
            definition: Replacement device definition. Defaults to the Mini MK3.
        """
        self._definition = definition or MINI_MK3_DEFINITION

    @property
    def definition(self) -> DeviceDefinition:
        return self._definition

    def set_layout(self, layout: Layout | int) -> list[int]:
        """
        Build select layout query.

        Args:
            layout: Layout to select

        Raises:
            ValueError: If layout is not a Layout value
        """
        return self.build_query(Command.SELECT_LAYOUT, [int(Layout(layout))])

    def text_scrolling(self, color: int, text: str, loop: bool = False, speed: int = 7) -> list[int]:
        """
        Build text scrolling query.

        Args:
            color: Palette colour index
            text: Text to scroll (sent as UTF-8)
            loop: Repeat the text until another message arrives
            speed: Scrolling speed
        """
        return self.build_query(
            Command.TEXT_SCROLLING,
            [bool_to_int(loop), speed, 0, color, *text.encode("utf-8")],
        )

    def programmer_toggle(self, enable: bool) -> list[int]:
        """Build programmer mode toggle query (switches from/to Live mode)."""
        return self.build_query(Command.PROGRAMMER, [bool_to_int(enable)])

    def daw_toggle(self, enable: bool) -> list[int]:
        """Build DAW mode toggle query."""
        return self.build_query(Command.DAW, [bool_to_int(enable)])

    def daw_clear(self, session: bool = True, drumrack: bool = True, controlchange: bool = True) -> list[int]:
        """
        Build DAW clear query.

        Args:
            session: Clear session layout
            drumrack: Clear drumrack layout
            controlchange: Clear control change layout
        """
        return self.build_query(
            Command.DAW_CLEAR,
            [bool_to_int(session), bool_to_int(drumrack), bool_to_int(controlchange)],
        )

    def led_lightning(self, colors: Sequence[int]) -> list[int]:
        """
        Build LED lighting query.

        Args:
            colors: Flat colour payload, laid out as described in the
                    Programmer's Reference (lighting type, LED index, data...)
        """
        return self.build_query(Command.LED_LIGHTNING, colors)

    def led_lighting_specs(self, specs: Iterable[Sequence[int]]) -> list[int]:
        """
        Build LED lighting query from per-LED specs.

        Args:
            specs: Iterable of (lighting_mode, led_index, *data_bytes)
        """
        return self.led_lightning([int(value) for spec in specs for value in spec])

    def led_brightness(self, brightness: int) -> list[int]:
        """Build LED brightness query (0-127, not clamped)."""
        return self.build_query(Command.LED_BRIGHTNESS, [brightness])

    def led_sleep(self, sleep: bool = False) -> list[int]:
        """
        Build LED sleep query.

        Args:
            sleep: Turn all pads off. The wire byte is the inverse (1 = awake).
        """
        return self.build_query(Command.LED_SLEEP, [bool_to_int(not sleep)])
