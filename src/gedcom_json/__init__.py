"""
gedcom_json: turn line-oriented GEDCOM into a nested JSON record tree.

    from gedcom_json import tokenize_text, build_tree, serialize_tree_to_json_string

    tree = build_tree(tokenize_text(text))
    print(serialize_tree_to_json_string(tree))
"""

from gedcom_json.exporter import serialize_tree_to_json_string
from gedcom_json.loader import (
    FlatRecord,
    GEDCOMTree,
    GedcomSyntaxError,
    LevelParseError,
    TreeNode,
    build_tree,
    tokenize_file,
    tokenize_line,
    tokenize_text,
)

__version__ = "0.1.0"

__all__ = [
    "FlatRecord",
    "GEDCOMTree",
    "GedcomSyntaxError",
    "LevelParseError",
    "TreeNode",
    "build_tree",
    "serialize_tree_to_json_string",
    "tokenize_file",
    "tokenize_line",
    "tokenize_text",
]
