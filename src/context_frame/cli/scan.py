"""Scan command -- detect context files and report maturity and quality."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..formatters import FORMATTERS, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import cli_errors, console, err_console, scan_and_score


def _report(path: Path, fmt: str, output: Optional[Path]) -> None:
    scan_result, score = scan_and_score(path)
    formatter = get_formatter(fmt)

    if output is None:
        formatter.render(scan_result, score)
        return

    output.write_text(formatter.format(scan_result, score), encoding="utf-8")
    err_console.print(f"[green]Report written to {output}[/green]")


@app.command()
def scan(
    path: Path = typer.Argument(
        Path("."),
        help="Repository to scan",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format",
        click_type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to a file instead of stdout",
        dir_okay=False,
    ),
    watch: bool = typer.Option(
        False,
        "--watch",
        help="Re-scan whenever files change",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """
    Scan a repository for AI context files.

    [bold cyan]Examples:[/bold cyan]

      context-frame scan

      context-frame scan ../service -f markdown -o CONTEXT.md

      context-frame scan --watch
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)
    fmt = fmt.lower()

    with cli_errors(logger, verbose=verbose):
        _report(path, fmt, output)

    if not watch:
        return

    from ..watcher import watch_repository

    def on_change(changed_files: list[str]) -> None:
        console.print(f"\n[dim]{len(changed_files)} file(s) changed, re-scanning...[/dim]")
        try:
            with cli_errors(logger, verbose=verbose):
                _report(path, fmt, output)
        except typer.Exit:
            # A failing scan is reported; the watcher keeps running
            pass

    console.print("[dim]Watching for changes (Ctrl+C to stop)...[/dim]")
    with cli_errors(logger, verbose=verbose):
        watch_repository(str(path), on_change)
