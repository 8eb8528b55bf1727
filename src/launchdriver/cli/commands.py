"""Encoding subcommands, one per driver operation."""

import click

from launchdriver.drivers import Layout

from .output import CliSettings, emit

LAYOUT_NAMES = {layout.name.lower().replace("_", "-"): layout for layout in Layout}

ON_OFF = click.Choice(["on", "off"], case_sensitive=False)


@click.command(name="layout")
@click.argument("name", type=click.Choice(list(LAYOUT_NAMES), case_sensitive=False))
@click.pass_obj
def layout(settings: CliSettings, name: str):
    """Select a layout (session, custom1-3, daw-fader, programmer)."""
    emit(settings, settings.driver.set_layout(LAYOUT_NAMES[name.lower()]))


@click.command(name="text")
@click.argument("color", type=int)
@click.argument("message")
@click.option("--loop", is_flag=True, help="Repeat until another message arrives")
@click.option("--speed", type=int, default=7, show_default=True, help="Scrolling speed")
@click.pass_obj
def text(settings: CliSettings, color: int, message: str, loop: bool, speed: int):
    """Scroll MESSAGE across the grid in palette colour COLOR."""
    emit(settings, settings.driver.text_scrolling(color, message, loop=loop, speed=speed))


@click.command(name="programmer")
@click.argument("state", type=ON_OFF)
@click.pass_obj
def programmer(settings: CliSettings, state: str):
    """Enter or leave programmer mode."""
    emit(settings, settings.driver.programmer_toggle(state.lower() == "on"))


@click.command(name="daw")
@click.argument("state", type=ON_OFF)
@click.pass_obj
def daw(settings: CliSettings, state: str):
    """Enter or leave DAW mode."""
    emit(settings, settings.driver.daw_toggle(state.lower() == "on"))


@click.command(name="daw-clear")
@click.option("--session/--no-session", default=True, help="Clear session layout")
@click.option("--drumrack/--no-drumrack", default=True, help="Clear drumrack layout")
@click.option("--controlchange/--no-controlchange", default=True, help="Clear control change layout")
@click.pass_obj
def daw_clear(settings: CliSettings, session: bool, drumrack: bool, controlchange: bool):
    """Clear DAW-controlled LED state."""
    emit(settings, settings.driver.daw_clear(session, drumrack, controlchange))


@click.command(name="leds")
@click.argument("values", nargs=-1, type=int, required=True)
@click.pass_obj
def leds(settings: CliSettings, values: tuple[int, ...]):
    """
    Send a raw LED lighting payload.

    VALUES is the flat colour array from the Programmer's Reference, e.g.
    "3 11 127 0 0" lights pad 11 red.
    """
    emit(settings, settings.driver.led_lightning(list(values)))


@click.command(name="brightness")
@click.argument("level", type=int)
@click.pass_obj
def brightness(settings: CliSettings, level: int):
    """Set LED brightness (0-127)."""
    emit(settings, settings.driver.led_brightness(level))


@click.command(name="sleep")
@click.pass_obj
def sleep(settings: CliSettings):
    """Turn all LEDs off."""
    emit(settings, settings.driver.led_sleep(True))


@click.command(name="wake")
@click.pass_obj
def wake(settings: CliSettings):
    """Turn LEDs back on after sleep."""
    emit(settings, settings.driver.led_sleep(False))
