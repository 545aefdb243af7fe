"""Entry point for the persian-shaper command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from persian_shaper import __version__
from persian_shaper.cli.commands import fonts, shape, table
from persian_shaper.config import LOG_LEVELS, Config
from persian_shaper.exceptions import ConfigError

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="persian-shaper")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default from config, else WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Shape Persian text into presentation forms."""
    # Logging must be live before the config file is read
    setup_logging((log_level or "WARNING").upper())
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    if log_level is None:
        logging.getLogger().setLevel(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(shape)
cli.add_command(table)
cli.add_command(fonts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
