"""
json_exporter.py
Nested JSON serializer for GEDCOMTree forests.

This exporter:
- Emits only the synthetic root's children, never the root itself
- Keeps sibling order and nesting exactly as built
- Writes absent pointers/data as "" (never null)
- Is deterministic: the same tree always yields the same text
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from gedcom_json.logger import get_logger
from gedcom_json.loader.tree_builder import GEDCOMTree, TreeNode

log = get_logger("json_exporter")


def _node_fields(node: TreeNode) -> Dict[str, Any]:
    return {
        "data": node.data,
        "tag": node.tag,
        "pointer": node.pointer,
        "level": node.level,
        "children": [],
    }


def node_to_dict(tree: GEDCOMTree, node: TreeNode) -> Dict[str, Any]:
    """
    Convert one node and its descendants into plain dicts.

    Uses an explicit stack; each parent fills its children list in order
    before any child is expanded.
    """
    result = _node_fields(node)
    stack = [(node, result)]
    while stack:
        current, out = stack.pop()
        for child in tree.children_of(current):
            child_out = _node_fields(child)
            out["children"].append(child_out)
            stack.append((child, child_out))
    return result


def build_forest_list(tree: GEDCOMTree) -> List[Dict[str, Any]]:
    """
    Convert the forest (the root's children) into a JSON-safe list.
    """
    return [node_to_dict(tree, record) for record in tree]


def serialize_tree_to_json_string(tree: GEDCOMTree, indent: int = 2) -> str:
    return json.dumps(
        build_forest_list(tree),
        indent=indent,
        ensure_ascii=False,
    )


def export_tree_json(tree: GEDCOMTree, output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting tree JSON to: %s (records=%d, nodes=%d)",
        output_path,
        len(tree),
        len(tree.nodes) - 1,
    )

    json_str = serialize_tree_to_json_string(tree, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
