"""Table command - list the presentation forms of each letter."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from persian_shaper.shaping.forms import LETTERS, ShapeIndex, get_entry

console = Console()


@click.command()
@click.option("--letter", help="Show a single letter")
def table(letter: str | None) -> None:
    """Show the presentation-form table."""
    if letter is not None:
        entry = get_entry(letter)
        if entry is None:
            console.print(f"[yellow]Not a shapable letter:[/yellow] {escape(repr(letter))}")
            raise SystemExit(1)
        entries = (entry,)
    else:
        entries = LETTERS

    out = Table(title="Persian Presentation Forms")
    out.add_column("Letter", style="cyan")
    out.add_column("Base", style="dim")
    for index in ShapeIndex:
        out.add_column(index.name.capitalize(), style="green")
    out.add_column("Joins forward", style="yellow")

    for entry in entries:
        out.add_row(
            entry.base,
            f"U+{ord(entry.base):04X}",
            *(f"{entry.glyph(i)} U+{entry.forms[i]:04X}" for i in ShapeIndex),
            "no" if entry.is_right_joining_only else "yes",
        )

    console.print(out)
    console.print(f"\n[bold]Total:[/bold] {len(entries)} letters")
