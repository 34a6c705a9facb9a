# src/clozeterms/cli.py
"""
clozeterms Command Line Interface (CLI).

A thin wrapper around :func:`clozeterms.pipelines.extract.extract_terms` using
`typer` and `rich`. The extraction core never touches files or the terminal;
this module does the reading and the rendering.

Usage
-----
    # Show the terms of a note as a table
    $ clozeterms extract notes/angkor.md

    # Latin-script notes, JSON for another tool, plus the definition-free text
    $ clozeterms extract notes/latin.md --splitter whitespace --json --leftover

    # List registered splitter aliases
    $ clozeterms splitters
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clozeterms.core.contracts.term import Term
from clozeterms.core.result import Result, err, ok
from clozeterms.core.settings import load_settings
from clozeterms.pipelines.extract import ExtractionResult, extract_terms
from clozeterms.stages.splitters import WordSplitter, all_splitters, resolve_splitter

# Pick up CLOZETERMS_* / LOG_LEVEL from a local .env before any settings are read.
load_dotenv()

app = typer.Typer(
    help="clozeterms: extract cloze terms and their splits from annotated notes.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _read_text(path: Path) -> Result[str, str]:
    """Read `path` as UTF-8, reporting failures as ``Err``."""
    try:
        return ok(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return err(f"could not read {path}: {e}")


def _term_payload(term: Term) -> dict[str, object]:
    """JSON-ready dict for a term, with splits in display order."""
    payload = term.model_dump(mode="json")
    payload["splits"] = term.sorted_splits()
    return payload


def _render_table(result: ExtractionResult, source: Path) -> None:
    """Render terms as a rich table, sorted by reference."""
    table = Table(title=f"Terms in {source.name}", show_lines=True)
    table.add_column("Reference", style="cyan", no_wrap=True)
    table.add_column("Text", style="bold")
    table.add_column("Splits", style="magenta")
    table.add_column("Definition")

    for term in sorted(result.terms, key=lambda t: t.reference):
        table.add_row(
            escape(term.reference),
            escape(term.text),
            escape(" / ".join(term.sorted_splits())),
            escape(term.definition),
        )

    console.print(table)
    console.print(f"[dim]{len(result.terms)} term(s)[/dim]")


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def extract(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the annotated text file.",
        ),
    ],
    splitter: Annotated[
        str | None,
        typer.Option(
            "--splitter",
            "-s",
            help="Splitter alias (see `splitters`) or a regular expression.",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print terms as a JSON array instead of a table."),
    ] = False,
    leftover: Annotated[
        bool,
        typer.Option(
            "--leftover",
            "-l",
            help="Also print the text with definition paragraphs removed.",
        ),
    ] = False,
) -> None:
    """
    Extract terms from FILE and print them.

    Inline references look like `[text]` or `[text][ref]`; definitions are
    their own paragraph starting with `[ref]: /split/split/`.
    """
    name = splitter or load_settings().default_splitter
    chosen: Result[WordSplitter, str] = resolve_splitter(name)
    if chosen.is_err():
        console.print(f"[bold red]Splitter Error:[/bold red] {escape(chosen.unwrap_err())}")
        raise typer.Exit(code=1)

    text = _read_text(file)
    if text.is_err():
        console.print(f"[bold red]Read Error:[/bold red] {escape(text.unwrap_err())}")
        raise typer.Exit(code=1)

    result = extract_terms(text.unwrap(), chosen.unwrap())

    if as_json:
        terms = [_term_payload(t) for t in sorted(result.terms, key=lambda t: t.reference)]
        document: object = terms
        if leftover:
            document = {"terms": terms, "leftover_text": result.leftover_text}
        typer.echo(json.dumps(document, ensure_ascii=False, indent=2))
        return

    _render_table(result, file)
    if leftover:
        console.print(Panel(Text(result.leftover_text), title="Leftover text", border_style="dim"))


@app.command()  # type: ignore[misc]
def splitters() -> None:
    """List the registered splitter aliases."""
    default = load_settings().default_splitter
    table = Table(title="Word splitters")
    table.add_column("Alias", style="cyan")
    table.add_column("Pattern")
    for alias, splitter in all_splitters().items():
        pattern = getattr(getattr(splitter, "pattern", None), "pattern", "-")
        marker = " [green](default)[/green]" if alias == default else ""
        table.add_row(f"{escape(alias)}{marker}", Text(pattern))
    console.print(table)


if __name__ == "__main__":
    app()
