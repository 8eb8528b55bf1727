"""Unit tests for Driver query framing."""

import mido
import pytest

from launchdriver.drivers import (
    DRIVERS,
    DeviceDefinition,
    Driver,
    LaunchpadMiniMK3,
    SysExEnvelope,
    available_drivers,
    bool_to_int,
    get_driver,
    register_driver,
)
from launchdriver.exceptions import MessageEncodingError


class TinyDriver(Driver):
    """Minimal driver with a short envelope."""

    def __init__(self, definition: DeviceDefinition):
        self._definition = definition

    @property
    def definition(self) -> DeviceDefinition:
        return self._definition


@pytest.fixture
def tiny_driver():
    """Create driver with a two byte header."""
    return TinyDriver(
        DeviceDefinition(
            device_name="Tiny",
            midi_in="Tiny In",
            midi_out="Tiny Out",
            sysex=SysExEnvelope(header=(0xF0, 0x7D)),
        )
    )


class TestQueryBuilder:
    """Test framing of command bodies."""

    def test_query_builder_frames_body(self, tiny_driver):
        """Test header + body + footer."""
        assert tiny_driver.query_builder([1, 2, 3]) == [0xF0, 0x7D, 1, 2, 3, 0xF7]

    def test_query_builder_empty_body(self, tiny_driver):
        """Test framing an empty body."""
        assert tiny_driver.query_builder([]) == [0xF0, 0x7D, 0xF7]

    def test_build_query(self, tiny_driver):
        """Test opcode followed by parameters."""
        assert tiny_driver.build_query(9, [4, 5]) == [0xF0, 0x7D, 9, 4, 5, 0xF7]

    def test_build_query_without_parameters(self, tiny_driver):
        """Test opcode alone."""
        assert tiny_driver.build_query(20) == [0xF0, 0x7D, 20, 0xF7]

    def test_build_query_accepts_iterables(self, tiny_driver):
        """Test that parameters may be any iterable."""
        assert tiny_driver.build_query(1, iter([2, 3])) == [0xF0, 0x7D, 1, 2, 3, 0xF7]

    def test_parameters_are_not_validated(self, tiny_driver):
        """Test that any integers are echoed verbatim."""
        assert tiny_driver.build_query(255, [1000, -5]) == [0xF0, 0x7D, 255, 1000, -5, 0xF7]

    def test_identity_comes_from_definition(self, tiny_driver):
        """Test device name and port names."""
        assert tiny_driver.device_name == "Tiny"
        assert tiny_driver.midi_in == "Tiny In"
        assert tiny_driver.midi_out == "Tiny Out"

    def test_driver_is_abstract(self):
        """Test that Driver cannot be used without a definition."""
        with pytest.raises(TypeError):
            Driver()

    def test_bool_to_int(self):
        """Test flag coercion."""
        assert bool_to_int(True) == 1
        assert bool_to_int(False) == 0


class TestToMessage:
    """Test conversion to mido messages."""

    def test_sysex_message(self, driver):
        """Test that envelope markers are stripped into a sysex message."""
        msg = Driver.to_message(driver.programmer_toggle(True))

        assert isinstance(msg, mido.Message)
        assert msg.type == "sysex"
        assert list(msg.data) == [0x00, 0x20, 0x29, 0x02, 0x0D, 0x0E, 0x01]

    def test_message_bytes_match_query(self, driver):
        """Test that the wire bytes equal the framed query."""
        query = driver.text_scrolling(5, "Hi")
        assert Driver.to_message(query).bytes() == query

    def test_data_byte_out_of_range(self, driver):
        """Test non 7-bit data is rejected when building the message."""
        query = driver.led_brightness(200)

        with pytest.raises(MessageEncodingError) as exc_info:
            Driver.to_message(query)

        assert exc_info.value.query == query
        assert "0 and 127" in exc_info.value.recovery_hint

    def test_non_ascii_text_rejected(self, driver):
        """Test UTF-8 bytes above 127 cannot be sent."""
        with pytest.raises(MessageEncodingError):
            Driver.to_message(driver.text_scrolling(5, "é"))


class TestRegistry:
    """Test driver registration."""

    def test_built_in_driver(self):
        """Test the Mini MK3 is registered on import."""
        assert get_driver("LaunchpadMiniMK3") is LaunchpadMiniMK3
        assert "LaunchpadMiniMK3" in available_drivers()

    def test_unknown_driver(self):
        """Test unknown names return None."""
        assert get_driver("APC40") is None

    def test_register_driver(self, monkeypatch):
        """Test registering an extra driver."""
        monkeypatch.setattr("launchdriver.drivers.DRIVERS", dict(DRIVERS))
        register_driver("Tiny", TinyDriver)

        assert get_driver("Tiny") is TinyDriver
        assert available_drivers() == ["LaunchpadMiniMK3", "Tiny"]
