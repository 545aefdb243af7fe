"""CLI commands for persian-shaper."""

from persian_shaper.cli.commands.shape import shape
from persian_shaper.cli.commands.table import table
from persian_shaper.cli.commands.fonts import fonts

__all__ = ["shape", "table", "fonts"]
