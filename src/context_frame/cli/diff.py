"""Diff command -- compare the current score against a saved JSON report."""

import os
from pathlib import Path

import typer
from rich.markup import escape

from ..baseline import BaselineMetrics, MetricDelta, diff_metrics, extract_baseline_metrics, load_baseline
from ..logging_config import setup_logging
from . import app
from ._common import cli_errors, console, scan_and_score


def _delta_markup(metric: MetricDelta) -> str:
    text = metric.format_delta()
    delta = metric.delta
    if delta is None or delta == 0:
        return f"[dim]{text}[/dim]"
    color = "green" if delta > 0 else "red"
    return f"[{color}]{text}[/{color}]"


@app.command(name="diff")
def diff_cmd(
    baseline: Path = typer.Argument(
        ...,
        help="JSON report saved earlier (e.g. with scan -f json -o)",
        dir_okay=False,
    ),
    path: Path = typer.Argument(
        Path("."),
        help="Repository to scan",
        file_okay=False,
        dir_okay=True,
    ),
):
    """
    Show how maturity level, quality and weight moved since a baseline.

    [bold cyan]Examples:[/bold cyan]

      context-frame scan -f json -o baseline.json

      context-frame diff baseline.json
    """
    logger = setup_logging(verbose=False)

    with cli_errors(logger):
        previous = extract_baseline_metrics(load_baseline(str(baseline)))
        scan_result, score = scan_and_score(path)

    current = BaselineMetrics.from_score(score)

    console.print("[bold]CONTEXT FRAME DIFF[/bold]")
    console.print(f"[dim]Baseline: {escape(os.path.abspath(baseline))}[/dim]")
    console.print(f"[dim]Current:  {escape(scan_result.base_path)}[/dim]\n")

    for metric in diff_metrics(previous, current):
        console.print(
            f"{metric.label:<8} {metric.format_value(metric.baseline)} -> "
            f"{metric.format_value(metric.current)} {_delta_markup(metric)}",
            highlight=False,
        )
