# src/gedcom_json/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_json.loader import (
        FlatRecord,
        GedcomSyntaxError,
        LevelParseError,
        TreeNode,
        GEDCOMTree,
        load_file,
        tokenize_file,
        tokenize_line,
        tokenize_text,
        build_tree,
    )
"""

from __future__ import annotations

from .file_loader import load_file
from .tokenizer import (
    FlatRecord,
    GedcomSyntaxError,
    LevelParseError,
    tokenize_file,
    tokenize_line,
    tokenize_text,
)
from .tree_builder import GEDCOMTree, TreeNode, build_tree


__all__ = [
    "FlatRecord",
    "GedcomSyntaxError",
    "LevelParseError",
    "TreeNode",
    "GEDCOMTree",
    "load_file",
    "tokenize_file",
    "tokenize_line",
    "tokenize_text",
    "build_tree",
]
