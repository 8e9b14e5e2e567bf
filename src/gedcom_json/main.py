"""
Main entry for the GEDCOM -> JSON converter.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No parsing or business logic lives here.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from gedcom_json.config import get_config
from gedcom_json.logger import get_logger, set_debug

from gedcom_json.core.context import ParseContext
from gedcom_json.core.exceptions import PipelineError
from gedcom_json.core.pipeline import Pipeline

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a GEDCOM file into nested JSON"
    )
    parser.add_argument(
        "input",
        help="Path to GEDCOM input file",
    )
    parser.add_argument(
        "output",
        help="Path to write the JSON output to",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path: str, debug_flag: bool) -> ParseContext:
    """
    Prepare context and execute the conversion pipeline.
    """

    cfg = get_config()
    debug = cfg.debug or bool(debug_flag)
    set_debug(debug)

    log.info("Loading GEDCOM: %s", input_path)

    ctx = ParseContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        debug=debug,
    )

    Pipeline(ctx).run()

    log.info("Conversion complete. Output: %s", output_path)
    return ctx


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
        )
    except PipelineError as exc:
        print(f"Parsing error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
