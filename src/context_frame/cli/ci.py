"""CI command -- enforce maturity thresholds, or write a workflow that does."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..logging_config import setup_logging
from . import app
from ._common import cli_errors, console


@app.command()
def ci(
    path: Path = typer.Argument(
        Path("."),
        help="Repository to check",
        file_okay=False,
        dir_okay=True,
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Write .github/workflows/context-frame.yml instead of checking",
    ),
    min_level: Optional[int] = typer.Option(
        None,
        "--min-level",
        help="Fail below this maturity level",
        min=0,
        max=8,
    ),
    min_quality: Optional[float] = typer.Option(
        None,
        "--min-quality",
        help="Fail below this quality score",
        min=0.0,
        max=10.0,
    ),
    min_refs_rate: Optional[float] = typer.Option(
        None,
        "--min-refs-rate",
        help="Fail below this reference resolution rate (0-1)",
        min=0.0,
        max=1.0,
    ),
):
    """
    Check a repository against its thresholds and exit non-zero on failure.

    Thresholds come from .context-frame.yaml, CONTEXT_FRAME_* environment
    variables, and these options, in increasing precedence.

    [bold cyan]Examples:[/bold cyan]

      context-frame ci

      context-frame ci --min-level 3 --min-quality 5

      context-frame ci --init
    """
    from ..ci import init_ci_workflow, run_ci

    logger = setup_logging(verbose=False)

    with cli_errors(logger):
        if init:
            workflow = init_ci_workflow(str(path))
            console.print(f"[green]Wrote workflow to {workflow}[/green]")
            raise typer.Exit(0)

        result = run_ci(
            str(path),
            min_level=min_level,
            min_quality_score=min_quality,
            min_resolved_refs_rate=min_refs_rate,
        )

    print(json.dumps(result.report, indent=2))
    raise typer.Exit(result.exit_code)
