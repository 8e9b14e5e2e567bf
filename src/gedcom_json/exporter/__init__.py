"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and CLI.
"""

from __future__ import annotations

from .exporter import export_tree_to_json
from .json_exporter import build_forest_list, serialize_tree_to_json_string

__all__ = [
    "export_tree_to_json",
    "build_forest_list",
    "serialize_tree_to_json_string",
]
