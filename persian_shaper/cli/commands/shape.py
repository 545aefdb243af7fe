"""Shape command - convert Persian text to presentation forms."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from persian_shaper.config import OUTPUT_FORMATS, Config
from persian_shaper.shaping import engine
from persian_shaper.shaping.forms import get_forms
from persian_shaper.shaping.joining import classify
from persian_shaper.shaping.parser import available_parsers, get_parser

console = Console(stderr=True)


def format_codepoints(text: str) -> str:
    return " ".join(f"U+{ord(char):04X}" for char in text)


def explain_run(text: str) -> Table:
    """Build a per-character breakdown of how ``text`` is shaped."""
    table = Table(title="Shaping breakdown")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Char", style="cyan")
    table.add_column("Code point", style="yellow")
    table.add_column("Form", style="green")
    table.add_column("Output", style="magenta")

    last = len(text) - 1
    for i, char in enumerate(text):
        forms = get_forms(char)
        if engine.is_digit(char):
            form, output = "digit", char
        elif forms is None or len(text) <= 1:
            form, output = "passthrough", char
        else:
            index = classify(text[i - 1] if i > 0 else None, text[i + 1] if i < last else None)
            form, output = index.name.lower(), forms[index]
        table.add_row(str(i), char, f"U+{ord(char):04X}", form, f"U+{ord(output):04X}")

    runs = [f"{start}-{end - 1}" for start, end in engine.iter_digit_runs(text)]
    if runs:
        table.caption = f"Digit runs reversed: {', '.join(runs)}"
    return table


def _read_input(text: str | None, input_file: Path | None, encoding: str) -> str:
    if text is not None:
        return text
    if input_file is not None:
        data = input_file.read_text(encoding=encoding)
    else:
        with click.open_file("-", encoding=encoding) as stream:
            data = stream.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data


@click.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    "-f",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read text from a file instead of the argument",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default from config)",
)
@click.option(
    "--per-line/--whole",
    default=None,
    help="Shape each line as its own run, or the input as one run",
)
@click.option(
    "--parser",
    "parser_name",
    type=click.Choice(available_parsers(), case_sensitive=False),
    default="persian",
    show_default=True,
    help="Glyph parser used to shape each run",
)
@click.option("--explain", is_flag=True, help="Show how each character was shaped")
@click.pass_context
def shape(
    ctx: click.Context,
    text: str | None,
    input_file: Path | None,
    output_format: str | None,
    per_line: bool | None,
    parser_name: str,
    explain: bool,
) -> None:
    """Shape TEXT (or --file, or stdin) into presentation forms."""
    config: Config = (ctx.obj or {}).get("config") or Config()
    output_format = output_format or config.output_format
    if per_line is None:
        per_line = config.per_line

    try:
        source = _read_input(text, input_file, config.encoding)
    except (UnicodeDecodeError, LookupError) as e:
        console.print(f"[red]Error:[/red] Cannot decode input: {e}")
        raise SystemExit(1) from e

    runs = source.split("\n") if per_line else [source]
    glyph_parser = get_parser(parser_name)
    shaped = [glyph_parser.parse(run) for run in runs]

    if output_format == "json":
        records = [
            {"input": run, "output": out, "codepoints": [ord(c) for c in out]}
            for run, out in zip(runs, shaped)
        ]
        click.echo(json.dumps(records, ensure_ascii=False, indent=2))
    elif output_format == "codepoints":
        for out in shaped:
            click.echo(format_codepoints(out))
    else:
        click.echo("\n".join(shaped))

    if explain:
        for run in runs:
            console.print(explain_run(run))
