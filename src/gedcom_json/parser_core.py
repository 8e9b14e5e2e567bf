"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations
from typing import List, Optional

from gedcom_json.config import get_config
from gedcom_json.logger import get_logger
from gedcom_json.loader.file_loader import load_file
from gedcom_json.loader.tokenizer import FlatRecord, tokenize_text
from gedcom_json.loader.tree_builder import GEDCOMTree, build_tree


class GEDCOMParser:
    """
    High-level parser:
      - loads file
      - tokenizes
      - builds tree

    One instance handles one document; create a new parser per input.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        self.records: List[FlatRecord] = []
        self.tree: Optional[GEDCOMTree] = None

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: str) -> None:
        """Tokenize GEDCOM input into a list of records."""
        self.log.info("Tokenizing GEDCOM input: %s", path)
        text = load_file(path)
        # Materialize so a bad level aborts before any tree exists.
        self.records = list(tokenize_text(text))

        self.log.debug("Record count = %d", len(self.records))

    # ---------------------------------------------------------
    # Build Tree
    # ---------------------------------------------------------
    def run(self, input_path: str) -> GEDCOMTree:
        """
        Full parse sequence.
        Returns: GEDCOMTree
        """
        self.load_file(input_path)

        self.log.info("Building tree from %d records...", len(self.records))
        self.tree = build_tree(self.records)

        orphaned = len(self.tree.orphans())
        if orphaned:
            self.log.debug("%d record(s) not reachable from the root", orphaned)

        return self.tree
