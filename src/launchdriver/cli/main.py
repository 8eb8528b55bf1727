"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from launchdriver.drivers import DeviceDefinition, available_drivers, get_driver
from launchdriver.exceptions import LaunchDriverError

from .commands import (
    brightness,
    daw,
    daw_clear,
    layout,
    leds,
    programmer,
    sleep,
    text,
    wake,
)
from .output import CliSettings, fail

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Rotating log file path (optional, defaults to stderr)
    """
    if verbose == 0 and log_file is None:
        return

    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler: logging.Handler
    if log_file:
        # Keeps last 5 files, max 1MB each
        handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=5)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}")


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="launchdriver")
@click.option(
    '--device',
    type=click.Choice(available_drivers()),
    default="LaunchpadMiniMK3",
    help='Driver used to encode queries (default: LaunchpadMiniMK3)'
)
@click.option(
    '--definition',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='JSON device definition replacing the built-in one'
)
@click.option(
    '--decimal',
    is_flag=True,
    help='Print bytes in decimal instead of hex'
)
@click.option(
    '--port',
    '-p',
    type=str,
    default=None,
    help='Send to this MIDI output port instead of printing'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(
    ctx,
    device: str,
    definition: Optional[Path],
    decimal: bool,
    port: Optional[str],
    verbose: int,
    log_file: Optional[Path]
):
    """
    Launchpad SysEx encoder.

    Prints the SysEx bytes for a Launchpad command, or sends them to a
    MIDI output port with --port.

    \b
    Examples:
      launchdriver layout programmer
      launchdriver text 5 "Hello" --loop
      launchdriver --port "LPMiniMK3 MIDI" brightness 64
    """
    setup_logging(verbose, log_file)

    driver_class = get_driver(device)
    if driver_class is None:
        raise click.BadParameter(f"Unknown driver: {device}", param_hint="--device")

    loaded = None
    if definition is not None:
        try:
            loaded = DeviceDefinition.from_json_file(definition)
        except LaunchDriverError as e:
            fail(e)

    ctx.obj = CliSettings(driver=driver_class(loaded), decimal=decimal, port=port)


cli.add_command(layout)
cli.add_command(text)
cli.add_command(programmer)
cli.add_command(daw)
cli.add_command(daw_clear)
cli.add_command(leds)
cli.add_command(brightness)
cli.add_command(sleep)
cli.add_command(wake)

if __name__ == "__main__":
    cli()
