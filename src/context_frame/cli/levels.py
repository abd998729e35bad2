"""Levels command -- show the maturity ladder."""

from rich.table import Table

from ..levels import MATURITY_LEVELS
from . import app
from ._common import console


@app.command()
def levels():
    """List the eight maturity levels and what each one requires."""
    table = Table(title="Context Maturity Levels", show_header=True, header_style="bold")
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Requirements")

    for level in MATURITY_LEVELS:
        table.add_row(
            str(level.level),
            level.name,
            level.description,
            "\n".join(level.requirements),
        )

    console.print(table)
