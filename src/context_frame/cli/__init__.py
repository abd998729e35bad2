"""CLI entry point; importing the command modules registers them on the app."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="context-frame",
    help="Context Frame - AI Context Maturity Scanner",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True, no_args_is_help=True)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Measure how well a repository is prepared for AI coding assistants.

    [bold cyan]Examples:[/bold cyan]

      context-frame scan

      context-frame scan ./my-repo -f json -o report.json

      context-frame ci --min-level 3
    """
    if version:
        console.print(f"[bold cyan]Context Frame[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


# Import subcommands to register them
from .scan import scan as _scan  # noqa: F401, E402
from .ci import ci as _ci  # noqa: F401, E402
from .badge import badge as _badge  # noqa: F401, E402
from .diff import diff_cmd as _diff  # noqa: F401, E402
from .levels import levels as _levels  # noqa: F401, E402
