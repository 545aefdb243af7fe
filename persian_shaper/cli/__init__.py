"""Command-line interface for persian-shaper."""

from persian_shaper.cli.main import cli, main

__all__ = ["cli", "main"]
