"""Shared CLI helpers."""

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

import typer
from rich.console import Console

from ..exceptions import ContextFrameError
from ..models import ScanResult, ScoreResult
from ..scanning import scan_repository
from ..scorer import calculate_score

console = Console()

# Errors go to stderr so machine-readable stdout stays parseable
err_console = Console(stderr=True)


def scan_and_score(path: Path) -> tuple[ScanResult, ScoreResult]:
    """Scan ``path`` and score the result."""
    scan_result = scan_repository(str(path))
    return scan_result, calculate_score(scan_result)


@contextlib.contextmanager
def cli_errors(logger: logging.Logger, verbose: bool = False) -> Iterator[None]:
    """Turn library errors into an error line and a non-zero exit code."""
    try:
        yield

    except typer.Exit:
        raise

    except ContextFrameError as e:
        logger.debug(f"Command failed: {e.to_dict()}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)
