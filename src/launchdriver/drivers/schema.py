"""Pydantic models describing a SysEx-driven device.

A DeviceDefinition carries everything about a device that is not encoding
logic: its display name, the MIDI port names it shows up as, and the SysEx
envelope wrapped around every query. Drivers ship a built-in definition;
a JSON file can replace it (for example to target a sibling model whose
header differs only in the model byte).
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from launchdriver.exceptions import ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

SYSEX_START = 0xF0
SYSEX_END = 0xF7


class SysExEnvelope(BaseModel):
    """Fixed bytes framing every query sent to the device."""

    model_config = ConfigDict(frozen=True)

    header: tuple[int, ...] = Field(
        min_length=1, description="Manufacturer/device header, starting with 0xF0"
    )
    footer: tuple[int, ...] = Field(
        default=(SYSEX_END,), description="Terminating bytes (always 0xF7)"
    )

    @field_validator("header")
    @classmethod
    def validate_header(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Header must open a SysEx message and carry 7-bit data bytes."""
        if v[0] != SYSEX_START:
            raise ValueError(f"SysEx header must start with {SYSEX_START} (0xF0), got {v[0]}")
        for byte in v[1:]:
            if not 0 <= byte <= 127:
                raise ValueError(f"SysEx byte {byte} out of range (0-127)")
        return v

    @field_validator("footer")
    @classmethod
    def validate_footer(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Footer is the single end-of-exclusive byte."""
        if v != (SYSEX_END,):
            raise ValueError(f"SysEx footer must be [{SYSEX_END}] (0xF7), got {list(v)}")
        return v


class DeviceDefinition(BaseModel):
    """Identity and envelope of a device."""

    model_config = ConfigDict(frozen=True)

    device_name: str = Field(min_length=1, description="Human-readable device name")
    midi_in: str = Field(min_length=1, description="MIDI input port name")
    midi_out: str = Field(min_length=1, description="MIDI output port name")
    sysex: SysExEnvelope = Field(description="SysEx envelope for every query")

    @classmethod
    def from_json_file(cls, path: Path) -> "DeviceDefinition":
        """
        Load a device definition from JSON with validation.

        Args:
            path: Path to the JSON file

        Returns:
            Validated DeviceDefinition

        Raises:
            ConfigurationError: If the file cannot be read
            ConfigFileInvalidError: If the file is not valid JSON
            ConfigValidationError: If a value fails validation
        """
        try:
            with open(path) as f:
                raw = f.read()
        except OSError as e:
            logger.error(f"Cannot read device definition {path}: {e}")
            raise ConfigurationError(
                user_message=f"Cannot read device definition file {path}",
                technical_message=f"Reading {path} failed: {e}",
                recoverable=True,
                recovery_hint="Check that the file exists and is readable",
            ) from e

        try:
            definition = cls.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Invalid device definition in {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.info(f"Loaded device definition for {definition.device_name} from {path}")
        return definition

    def to_json_file(self, path: Path, indent: int = 2) -> None:
        """Save definition to JSON file."""
        with open(path, "w") as f:
            f.write(self.model_dump_json(indent=indent))
