"""
exporter.py
High-level JSON export entry point.

This module provides a stable API used by the pipeline:

    export_tree_to_json(tree, output_path)

It delegates the actual JSON construction to json_exporter.export_tree_json.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from gedcom_json.loader.tree_builder import GEDCOMTree

from .json_exporter import export_tree_json


def export_tree_to_json(tree: GEDCOMTree, output_path: str | Path, **kwargs: Any) -> None:
    """
    Write the forest of ``tree`` to ``output_path`` as pretty-printed JSON.

    Keyword arguments (e.g. indent=4) are forwarded to
    json_exporter.export_tree_json. Filesystem errors propagate unchanged.
    """
    if not isinstance(tree, GEDCOMTree):
        raise TypeError(
            f"export_tree_to_json expects a GEDCOMTree, got {type(tree).__name__}"
        )

    export_tree_json(tree, Path(output_path), **kwargs)
