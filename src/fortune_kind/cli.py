"""Command line interface for fortune-kind."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from fortune_kind import __version__
from fortune_kind.config import AppConfig, CorpusKind
from fortune_kind.corpus.length import MAX_LEVEL
from fortune_kind.errors import CorpusError, CorpusNotFoundError
from fortune_kind.fortune import format_match, get_quote, search_fortunes


console = Console(stderr=True)
app = typer.Typer(help="fortune-kind - a kinder fortune", add_completion=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fortune-kind {__version__}")
        raise typer.Exit()


def _corpus_kind(all_: bool, unkind: bool) -> CorpusKind:
    if all_ and unkind:
        raise typer.BadParameter("--all and --unkind cannot be combined.")
    if all_:
        return "all"
    if unkind:
        return "unkind"
    return "kind"


def _report(exc: CorpusError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(exc.message)}", soft_wrap=True)
    if isinstance(exc, CorpusNotFoundError):
        console.print(f"[dim]{escape(exc.hint)}[/dim]", soft_wrap=True)


@app.command()
def main(
    find: Optional[str] = typer.Option(
        None, "--find", "-m", metavar="PATTERN", help="Print every fortune containing PATTERN."
    ),
    short: int = typer.Option(
        0, "--short", "-s", count=True, help="Show a short aphorism. Repeat for shorter ones."
    ),
    length: Optional[int] = typer.Option(
        None, "--length", "-n", min=1, help="Show a fortune no longer than this many characters."
    ),
    all_: bool = typer.Option(False, "--all", "-a", help="Show all fortunes, including unkind."),
    unkind: bool = typer.Option(False, "--unkind", "-u", "-o", help="Show only unkind fortunes."),
    fortune_dir: Optional[Path] = typer.Option(
        None, "--dir", help="Fortune directory or file (overrides FORTUNE_DIR)."
    ),
    fortune_off_dir: Optional[Path] = typer.Option(
        None, "--off-dir", help="Unkind fortune directory or file (overrides FORTUNE_OFF_DIR)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Print a random fortune, weighted towards larger fortune files."""
    _setup_logging(verbose)
    config = AppConfig(fortune_dir=fortune_dir, fortune_off_dir=fortune_off_dir)
    locations = config.locations(_corpus_kind(all_, unkind), base_dir=Path.cwd())

    try:
        if find is not None:
            for match in search_fortunes(find, locations):
                typer.echo(format_match(match))
            return

        outcome = get_quote(
            locations,
            min(short, MAX_LEVEL),
            max_length=length,
            short_length=config.short_length,
        )
    except CorpusError as exc:
        _report(exc)
        raise typer.Exit(code=1) from exc

    text = outcome.render()
    if text is not None:
        typer.echo(text)
