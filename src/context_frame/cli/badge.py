"""Badge command -- print a shields.io badge for the maturity level."""

from pathlib import Path

import click
import typer

from ..formatters.badge import BADGE_STYLES, badge_markdown, badge_url
from ..logging_config import setup_logging
from . import app
from ._common import cli_errors, scan_and_score


@app.command()
def badge(
    path: Path = typer.Argument(
        Path("."),
        help="Repository to scan",
        file_okay=False,
        dir_okay=True,
    ),
    style: str = typer.Option(
        "flat",
        "--style",
        help="Badge style",
        click_type=click.Choice(list(BADGE_STYLES)),
    ),
):
    """Print the badge URL and a markdown snippet for README files."""
    logger = setup_logging(verbose=False)

    with cli_errors(logger):
        _scan_result, score = scan_and_score(path)

    print(badge_url(score.maturity_level, style))
    print(badge_markdown(score.maturity_level, style))
