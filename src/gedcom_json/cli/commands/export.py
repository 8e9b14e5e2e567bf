from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_json.cli.utils import fail, load_gedcom, write_text
from gedcom_json.config import get_config
from gedcom_json.exporter import serialize_tree_to_json_string

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        min=0,
        help="Indentation width (defaults to output.indent from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the GEDCOM record tree as nested JSON (stdout by default).
    """
    tree = load_gedcom(gedcom, verbose=verbose)

    if indent is None:
        indent = get_config().indent

    if verbose:
        console.log("Exporting JSON")

    try:
        payload = serialize_tree_to_json_string(tree, indent=indent)
    except RecursionError:
        fail(f"Tree too deeply nested to serialize (max depth {tree.max_depth()})")

    write_text(payload, out=out)

    if verbose:
        console.log("Export complete")
