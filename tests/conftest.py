"""Pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from launchdriver.drivers import LaunchpadMiniMK3


@pytest.fixture
def driver():
    """Create a Mini MK3 driver with the built-in definition."""
    return LaunchpadMiniMK3()


@pytest.fixture
def mock_port():
    """Create mock mido output port."""
    port = Mock()
    port.name = "LPMiniMK3 MIDI"
    port.send = Mock(return_value=None)
    return port
