"""Fonts command - font inspection utilities."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from persian_shaper.config import Config
from persian_shaper.exceptions import FontLoadError
from persian_shaper.fonts import check_font_coverage

console = Console()


@click.group()
def fonts() -> None:
    """Font inspection commands."""
    pass


@fonts.command("coverage")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--font-number", type=int, help="Face index inside a TTC collection")
@click.pass_context
def font_coverage(ctx: click.Context, font_file: Path, font_number: int | None) -> None:
    """Check that FONT_FILE maps every Persian presentation form."""
    config: Config = (ctx.obj or {}).get("config") or Config()
    if font_number is None:
        font_number = config.font_number

    try:
        with console.status(f"[bold green]Reading {font_file.name}..."):
            report = check_font_coverage(font_file, font_number)
    except FontLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if report.is_complete:
        console.print(
            f"[green]Complete:[/green] {font_file.name} covers all "
            f"{report.total} presentation forms"
        )
        return

    out = Table(title=f"Missing forms in {font_file.name}")
    out.add_column("Letter", style="cyan")
    out.add_column("Missing code points", style="red")
    for base, codepoints in report.missing.items():
        out.add_row(base, " ".join(f"U+{cp:04X}" for cp in codepoints))

    console.print(out)
    console.print(
        f"\n[bold]Covered:[/bold] {report.covered}/{report.total} "
        f"([red]{report.missing_count} missing[/red])"
    )
    raise SystemExit(1)
