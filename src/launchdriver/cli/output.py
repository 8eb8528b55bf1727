"""Printing and sending queries from the command line."""

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn, Optional

import click
import mido

from launchdriver.drivers import Driver
from launchdriver.exceptions import LaunchDriverError, PortUnavailableError, format_error_for_display
from launchdriver.transport import MidoTransport

logger = logging.getLogger(__name__)


@dataclass
class CliSettings:
    """Options shared by every subcommand."""

    driver: Driver
    decimal: bool = False
    port: Optional[str] = None


def format_query(query: Sequence[int], decimal: bool = False) -> str:
    """Render a query as space-separated hex (default) or decimal bytes."""
    if decimal:
        return " ".join(str(byte) for byte in query)
    return " ".join(f"{byte:02X}" for byte in query)


def fail(error: Exception) -> NoReturn:
    """Print an error with its recovery hint and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


def emit(settings: CliSettings, query: list[int]) -> None:
    """Print a query, or transmit it when an output port was given."""
    if settings.port is None:
        click.echo(format_query(query, settings.decimal))
        return

    try:
        try:
            port = mido.open_output(settings.port)
        except OSError as e:
            logger.error(f"Cannot open MIDI output {settings.port}: {e}")
            raise PortUnavailableError(settings.port, str(e)) from e
        except ImportError as e:
            logger.error(f"No mido backend available to open {settings.port}: {e}")
            raise PortUnavailableError(settings.port, str(e), backend_missing=True) from e

        with port:
            MidoTransport(port).transmit(query)
    except LaunchDriverError as e:
        logger.error(e.technical_message)
        fail(e)

    click.echo(f"Sent to {settings.port}: {format_query(query, settings.decimal)}")
