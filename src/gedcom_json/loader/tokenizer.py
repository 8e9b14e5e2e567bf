# src/gedcom_json/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

# <level> (<pointer> | word boundary) <tag> (<space><data> | word boundary)
#
# The pattern is searched, not anchored: anything ahead of the first match on
# a line (a BOM, stray punctuation) is skipped rather than rejected.
LINE_PATTERN = re.compile(
    r"\s*(0|[1-9]+[0-9]*) (@[^@]+@ |\b)([A-Za-z0-9_]+)( [^\n\r]*|\b)"
)

# Levels are stored as signed 32-bit integers.
MAX_LEVEL = 2**31 - 1


@dataclass(frozen=True)
class FlatRecord:
    """
    One tokenized GEDCOM line.

    Attributes:
        level: Declared nesting depth (0 for top-level records).
        pointer: Cross-reference identifier such as "@I1@", or "" when absent.
        tag: Record type, e.g. "HEAD", "INDI", "NAME".
        data: Trailing text after the tag, whitespace-trimmed ("" when absent).
        lineno: 1-based physical line number the record came from.
    """
    level: int
    pointer: str
    tag: str
    data: str
    lineno: int = 0


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


class LevelParseError(GedcomSyntaxError):
    """Raised when a matched level token is not a usable integer."""


def _parse_level(text: str, lineno: int) -> int:
    try:
        level = int(text, 10)
    except ValueError:
        raise LevelParseError(
            f"Line {lineno}: level is not numeric -> {text!r}"
        ) from None

    if level < 0 or level > MAX_LEVEL:
        raise LevelParseError(
            f"Line {lineno}: level out of range -> {text!r}"
        )
    return level


def tokenize_line(line: str, lineno: int = 0) -> List[FlatRecord]:
    """
    Return every record found in a single physical line.

    A well-formed line yields exactly one record; a blank or malformed line
    yields none. Examples:
        "0 HEAD"                  -> [FlatRecord(0, "", "HEAD", "")]
        "0 @I1@ INDI"             -> [FlatRecord(0, "@I1@", "INDI", "")]
        "1 NAME John /Doe/"       -> [FlatRecord(1, "", "NAME", "John /Doe/")]
        "not a gedcom line"       -> []

    Raises:
        LevelParseError: if a matched level does not fit the level range.
    """
    records: List[FlatRecord] = []

    for match in LINE_PATTERN.finditer(line):
        level_str, pointer, tag, data = match.groups()
        records.append(
            FlatRecord(
                level=_parse_level(level_str, lineno),
                # The pointer group swallows its separator space.
                pointer=pointer.rstrip(" "),
                tag=tag,
                data=data.strip(),
                lineno=lineno,
            )
        )

    return records


def tokenize_text(text: str) -> Iterator[FlatRecord]:
    """
    Yield FlatRecords for a whole GEDCOM document, in document order.

    Lines that do not match the record grammar are skipped silently.
    """
    # Only LF delimits lines; a stray CR already ends a record's data.
    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        yield from tokenize_line(raw_line, lineno=lineno)


def tokenize_file(path: Union[str, Path]) -> Iterator[FlatRecord]:
    """
    Yield FlatRecords for every matching line of the given file.

    Args:
        path: Path to a UTF-8 GEDCOM file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        LevelParseError: if a line carries an unusable level.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    text = file_path.read_text(encoding="utf-8")
    yield from tokenize_text(text)
