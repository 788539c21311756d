# src/genparse/cli.py
"""
genparse Command Line Interface (CLI).

A thin `typer` + `rich` shell over the transforms, handy for inspecting a
saved completion from the terminal.

Usage
-----
    $ genparse backticks completion.md
    $ genparse blocks completion.md -d tsx -d css
    $ genparse yaml completion.yaml
    $ genparse decorators Page.tsx
    $ genparse genui Page.tsx --output Page.rewritten.tsx

Every FILE argument accepts ``-`` to read from stdin. Extracted source is
written to stdout verbatim so it can be redirected into a file; Rich is used
only for tables, panels and status lines. A command whose
transform returns its failure sentinel prints the reason and exits with
code 1; an empty decorator list is a valid answer and exits 0.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from genparse.editors.genui import edit_gen_ui
from genparse.extractors.decorators import extract_decorators
from genparse.extractors.fences import extract_backticks, extract_backticks_multiple
from genparse.parsers.yaml_doc import parse_yaml

load_dotenv()

app = typer.Typer(
    help="genparse: pull fenced blocks, YAML and @need markers out of generated text.",
    rich_markup_mode="markdown",
)
console = Console()

InputFile = Annotated[
    typer.FileText,
    typer.Argument(help="Input file, or '-' for stdin."),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _fail(message: str) -> NoReturn:
    """Print a failure line and exit with code 1."""
    console.print(f"[bold red]❌ {message}[/bold red]")
    raise typer.Exit(code=1)


def _print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload, ensure_ascii=False, default=str))


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def backticks(file: InputFile) -> None:
    """Print the body between the first and last fence lines."""
    found = extract_backticks(file.read())
    if found is None:
        _fail("No fenced block found.")
    typer.echo(found.text)


@app.command()  # type: ignore[misc]
def blocks(
    file: InputFile,
    delimiter: Annotated[
        list[str],
        typer.Option(
            "--delimiter",
            "-d",
            help="Fence label to extract; repeat in the order the blocks appear.",
        ),
    ],
) -> None:
    """Extract labeled fenced blocks and print them as JSON."""
    found = extract_backticks_multiple(file.read(), delimiter)
    if found is None:
        _fail(f"None of the delimiters matched: {', '.join(delimiter)}")
    _print_json(found)


@app.command()  # type: ignore[misc]
def yaml(file: InputFile) -> None:
    """Decode a YAML document and print it as JSON."""
    parsed = parse_yaml({"text": file.read()})
    if parsed is None:
        _fail("Input is not a usable YAML document.")
    _print_json(parsed)


@app.command()  # type: ignore[misc]
def decorators(
    file: InputFile,
    show_snippets: Annotated[
        bool,
        typer.Option("--snippets/--no-snippets", help="Print each context snippet."),
    ] = False,
) -> None:
    """List the @need markers found in a source file."""
    found = extract_decorators(file.read())
    if not found:
        console.print("[dim]No @need markers found.[/dim]")
        return

    table = Table(title=f"{len(found)} @need marker(s)")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Description")
    for item in found:
        table.add_row(str(item.line_number), item.type, item.description)
    console.print(table)

    if show_snippets:
        for item in found:
            console.print(
                Panel(
                    Syntax(item.snippet, "tsx", line_numbers=False),
                    title=f"line {item.line_number} · {item.type}",
                    border_style="dim",
                )
            )


@app.command()  # type: ignore[misc]
def genui(
    file: InputFile,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the rewritten module here."),
    ] = None,
) -> None:
    """Rewrite section/view imports into GenUI wrapper tags."""
    edited = edit_gen_ui(file.read())

    if output is not None:
        output.write_text(edited.text, encoding="utf-8")
        console.print(f"[dim]Saved to: {output}[/dim]")
    else:
        typer.echo(edited.text)

    console.print(
        Panel(
            escape(f"sections: {edited.ids.sections}\nviews: {edited.ids.views}"),
            title="GenUI ids",
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
