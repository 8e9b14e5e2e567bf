from __future__ import annotations

from gedcom_json.core.context import ParseContext
from gedcom_json.core.exceptions import (
    InputAccessError,
    OutputAccessError,
    ParseExecutionError,
    SerializationError,
)
from gedcom_json.exporter import export_tree_to_json
from gedcom_json.loader.tokenizer import GedcomSyntaxError
from gedcom_json.loader.tree_builder import GEDCOMTree
from gedcom_json.parser_core import GEDCOMParser


class Pipeline:
    """
    Orchestrates the GEDCOM -> JSON conversion.
    No business logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> GEDCOMTree:
        self.log.info("Pipeline starting")

        try:
            parser = GEDCOMParser(config=self.ctx.config)
            tree = parser.run(self.ctx.input_path)
        except (OSError, UnicodeDecodeError) as exc:
            self.log.error("Cannot read input %s: %s", self.ctx.input_path, exc)
            raise InputAccessError(str(exc)) from exc
        except GedcomSyntaxError as exc:
            self.log.error("Parsing failed: %s", exc)
            raise ParseExecutionError(str(exc)) from exc

        orphaned = len(tree.orphans())
        self.ctx.stats.update(
            records=len(tree.nodes) - 1,
            attached=len(tree.nodes) - 1 - orphaned,
            orphaned=orphaned,
            top_level=len(tree),
        )

        try:
            export_tree_to_json(tree, self.ctx.output_path, indent=self.ctx.config.indent)
        except OSError as exc:
            self.log.error("Cannot write output %s: %s", self.ctx.output_path, exc)
            raise OutputAccessError(str(exc)) from exc
        except RecursionError as exc:
            # json.dumps recurses once per nesting level.
            self.log.error("Tree too deeply nested to serialize: %s", exc)
            raise SerializationError(
                f"tree too deeply nested to serialize (max depth {tree.max_depth()})"
            ) from exc

        self.log.info("Pipeline completed successfully")
        return tree
