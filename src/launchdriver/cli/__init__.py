"""Command line interface for launchdriver."""

from .main import cli

__all__ = ["cli"]
