"""Main entry point for launchdriver."""

from launchdriver.cli.main import cli

if __name__ == "__main__":
    cli()
