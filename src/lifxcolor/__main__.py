"""Main entry point for lifxcolor."""

from lifxcolor.cli import cli

if __name__ == "__main__":
    cli()
