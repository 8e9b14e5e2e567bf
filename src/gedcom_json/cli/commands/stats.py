
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_json.cli.utils import load_gedcom

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file's record tree.
    """
    tree = load_gedcom(gedcom, verbose=verbose)

    total = len(tree.nodes) - 1
    orphaned = len(tree.orphans())

    table = Table(title="GEDCOM Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Records", str(total))
    table.add_row("Attached", str(total - orphaned))
    table.add_row("Orphaned", str(orphaned))
    table.add_row("Top-level records", str(len(tree)))
    table.add_row("Max depth", str(tree.max_depth()))
    table.add_row("Top-level tags", ", ".join(tree.all_tags()) or "-")

    console.print(table)
