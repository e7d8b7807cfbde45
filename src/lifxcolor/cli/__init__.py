"""Command line interface for lifxcolor."""

from .main import cli

__all__ = ["cli"]
