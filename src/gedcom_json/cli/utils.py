
from __future__ import annotations

import time
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from gedcom_json.loader.tokenizer import GedcomSyntaxError, tokenize_file
from gedcom_json.loader.tree_builder import GEDCOMTree, build_tree

console = Console(stderr=True)


def fail(message: str) -> NoReturn:
    """
    Report an error on stderr and stop the command with exit status 1.
    """
    console.print(f"[red][ERROR][/red] {escape(message)}", highlight=False)
    raise typer.Exit(code=1)


def load_gedcom(path: Path, *, verbose: bool = False) -> GEDCOMTree:
    """
    Tokenize and build the tree for one GEDCOM file.
    """
    t0 = time.perf_counter()

    try:
        tree = build_tree(tokenize_file(path))
    except (OSError, UnicodeDecodeError) as exc:
        fail(f"Cannot read {path}: {exc}")
    except GedcomSyntaxError as exc:
        fail(f"Parsing error: {exc}")

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s ({len(tree.nodes) - 1} records)")

    return tree


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to a file, or to stdout when no file is given.
    """
    if out:
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(payload, encoding="utf-8")
        except OSError as exc:
            fail(f"Cannot write {out}: {exc}")
    else:
        print(payload)
