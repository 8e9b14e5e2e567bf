# src/gedcom_json/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from gedcom_json.logger import get_logger

from .tokenizer import FlatRecord

log = get_logger("tree_builder")

ROOT_INDEX = 0
ROOT_LEVEL = -1


@dataclass
class TreeNode:
    """
    A record placed into the hierarchy.

    Children are indices into the owning GEDCOMTree's node arena, kept in
    arrival order. Nodes do not know their parent.
    """

    level: int
    tag: str
    data: str = ""
    pointer: str = ""
    lineno: int = 0
    children: List[int] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: FlatRecord) -> "TreeNode":
        return cls(
            level=record.level,
            tag=record.tag,
            data=record.data,
            pointer=record.pointer,
            lineno=record.lineno,
        )

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<TreeNode {self.level}{ptr} {self.tag}: {self.data!r}>"


@dataclass
class GEDCOMTree:
    """
    Arena holding every node of one parsed document.

    ``nodes[0]`` is the synthetic root (level -1); every other entry is one
    input record, in document order, so ``nodes[i + 1]`` came from the i-th
    record. The forest is the root's children.
    """

    nodes: List[TreeNode]

    _pointer_index: Dict[str, TreeNode] = field(
        default_factory=dict, init=False, repr=False
    )
    _tag_index: Dict[str, List[TreeNode]] = field(
        default_factory=dict, init=False, repr=False
    )
    _indexes_built: bool = field(default=False, init=False, repr=False)

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    @property
    def root(self) -> TreeNode:
        return self.nodes[ROOT_INDEX]

    @property
    def records(self) -> List[TreeNode]:
        """Top-level nodes of the forest."""
        return self.children_of(self.root)

    def children_of(self, node: TreeNode) -> List[TreeNode]:
        return [self.nodes[i] for i in node.children]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.records)

    def iter_nodes(self) -> Iterator[TreeNode]:
        """
        Iterate over every node reachable from the root, pre-order,
        left to right. The synthetic root itself is not yielded.

        Walks with an explicit stack, so nesting depth is unbounded.
        """
        stack = list(reversed(self.root.children))
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def orphans(self) -> List[TreeNode]:
        """
        Return nodes that cannot be reached from the root.

        These are records whose level jumped by more than one, plus anything
        that attached beneath them.
        """
        reachable = {id(node) for node in self.iter_nodes()}
        return [n for n in self.nodes[1:] if id(n) not in reachable]

    def max_depth(self) -> int:
        """Depth of the deepest reachable node (1 for a flat forest, 0 if empty)."""
        deepest = 0
        stack = [(index, 1) for index in self.root.children]
        while stack:
            index, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in self.nodes[index].children)
        return deepest

    # ------------------------------------------------------------------ #
    # Index construction
    # ------------------------------------------------------------------ #

    def _build_indexes(self) -> None:
        """Build pointer and tag indexes over reachable nodes."""
        pointer_index: Dict[str, TreeNode] = {}
        tag_index: Dict[str, List[TreeNode]] = {}

        for node in self.iter_nodes():
            if node.pointer:
                pointer_index.setdefault(node.pointer, node)
            tag_index.setdefault(node.tag.upper(), []).append(node)

        self._pointer_index = pointer_index
        self._tag_index = tag_index
        self._indexes_built = True

    def _ensure_indexes(self) -> None:
        if not self._indexes_built:
            self._build_indexes()

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def find_by_pointer(self, pointer: str) -> Optional[TreeNode]:
        """
        Return the first reachable node carrying the given @XREF@ pointer.

        No dereferencing happens anywhere else; this is a lookup helper only.
        """
        if not pointer:
            return None
        self._ensure_indexes()
        return self._pointer_index.get(pointer)

    def find_records_by_tag(self, tag: str) -> List[TreeNode]:
        """Return all top-level records with the given tag (case-insensitive)."""
        if not tag:
            return []
        self._ensure_indexes()
        candidates = self._tag_index.get(tag.upper(), [])
        top_level = {id(n) for n in self.records}
        return [n for n in candidates if id(n) in top_level]

    def all_tags(self) -> List[str]:
        """Return the distinct tags found among top-level records."""
        return sorted({rec.tag for rec in self.records})

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GEDCOMTree records={len(self.records)} nodes={len(self.nodes) - 1}>"


def build_tree(records: Iterable[FlatRecord]) -> GEDCOMTree:
    """
    Build a GEDCOMTree from records in document order.

    A stack holds the path of currently open nodes. For each record the
    stack is unwound to the nearest node strictly shallower than it; the
    record is attached there only if that node is exactly one level up.
    Either way the record is pushed, so its own children can still attach
    to it.
    """
    nodes: List[TreeNode] = [TreeNode(level=ROOT_LEVEL, tag="")]
    stack: List[int] = [ROOT_INDEX]

    for record in records:
        index = len(nodes)
        nodes.append(TreeNode.from_record(record))

        # The root's level is below any record's, so it is never popped off.
        parent = stack.pop()
        while nodes[parent].level >= record.level:
            parent = stack.pop()

        if nodes[parent].level == record.level - 1:
            nodes[parent].children.append(index)
        else:
            log.debug(
                "Line %d: %s at level %d left unattached (nearest open level %d)",
                record.lineno,
                record.tag,
                record.level,
                nodes[parent].level,
            )

        stack.append(parent)
        stack.append(index)

    return GEDCOMTree(nodes=nodes)
