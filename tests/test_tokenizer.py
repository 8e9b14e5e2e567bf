# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_json.loader import (
    FlatRecord,
    GedcomSyntaxError,
    LevelParseError,
    tokenize_file,
    tokenize_line,
    tokenize_text,
)
from gedcom_json.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    [record] = tokenize_line("0 HEAD", lineno=1)
    assert record.lineno == 1
    assert record.level == 0
    assert record.pointer == ""
    assert record.tag == "HEAD"
    assert record.data == ""


def test_tokenize_line_pointer_keeps_delimiters_without_separator() -> None:
    [record] = tokenize_line("1 @SUB1@ SUBM")
    assert record.level == 1
    assert record.pointer == "@SUB1@"
    assert record.tag == "SUBM"
    assert record.data == ""


def test_tokenize_line_with_data() -> None:
    [record] = tokenize_line("1 OCCU US President No. 42", lineno=10)
    assert record.tag == "OCCU"
    assert record.data == "US President No. 42"
    assert record.lineno == 10


def test_tokenize_line_pointer_value_stays_in_data() -> None:
    [record] = tokenize_line("1 FAMS @F1@")
    assert record.pointer == ""
    assert record.tag == "FAMS"
    assert record.data == "@F1@"


def test_tokenize_line_trailing_blank_data_is_empty_string() -> None:
    [record] = tokenize_line("1 NOTE ")
    assert record.tag == "NOTE"
    assert record.data == ""


def test_tokenize_line_trims_data() -> None:
    [record] = tokenize_line("  2 DATE   19 AUG 1946   ")
    assert record.level == 2
    assert record.data == "19 AUG 1946"


def test_tokenize_line_skips_leading_bom() -> None:
    [record] = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert record.level == 0
    assert record.tag == "HEAD"


@pytest.mark.parametrize("line", ["", "   ", "garbage", "HEAD 0", "0", "@I1@ INDI"])
def test_tokenize_line_non_matching_yields_nothing(line: str) -> None:
    assert tokenize_line(line) == []


def test_tokenize_line_level_overflow_raises() -> None:
    with pytest.raises(LevelParseError):
        tokenize_line("99999999999 NAME Someone", lineno=3)


def test_level_parse_error_is_a_syntax_error() -> None:
    assert issubclass(LevelParseError, GedcomSyntaxError)
    assert issubclass(GedcomSyntaxError, ValueError)


def test_tokenize_line_largest_level_is_accepted() -> None:
    [record] = tokenize_line("2147483647 DEEP")
    assert record.level == 2147483647


def test_tokenize_text_preserves_document_order_and_skips_noise() -> None:
    text = "0 HEAD\n\nthis is not a record\n1 NAME Jane\r\n0 TRLR\n"
    records = list(tokenize_text(text))

    assert [r.tag for r in records] == ["HEAD", "NAME", "TRLR"]
    assert [r.lineno for r in records] == [1, 4, 5]
    # The CR of a CRLF ending never reaches the data.
    assert records[1].data == "Jane"


def test_tokenize_text_is_deterministic() -> None:
    text = mock_file_path("sample.ged").read_text(encoding="utf-8")
    assert list(tokenize_text(text)) == list(tokenize_text(text))


def test_tokenize_text_aborts_on_bad_level() -> None:
    text = "0 HEAD\n1 NAME ok\n4294967296 NAME bad\n1 SEX M\n"
    with pytest.raises(LevelParseError):
        list(tokenize_text(text))


def test_records_are_immutable() -> None:
    record = FlatRecord(level=0, pointer="", tag="HEAD", data="")
    with pytest.raises(AttributeError):
        record.tag = "TRLR"  # type: ignore[misc]


def test_tokenize_file_reads_existing_mock_file() -> None:
    records = list(tokenize_file(mock_file_path("sample.ged")))

    assert len(records) == 26
    assert records[0].level == 0
    assert records[0].tag == "HEAD"
    assert records[-1].tag == "TRLR"


def test_tokenize_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "nope.ged"))
