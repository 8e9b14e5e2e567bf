# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from gedcom_json.cli import app
from gedcom_json.utils import mock_file_path

runner = CliRunner()


def test_export_to_file(tmp_path) -> None:
    out = tmp_path / "sample.json"
    result = runner.invoke(app, ["export", str(mock_file_path("sample.ged")), "--out", str(out)])

    assert result.exit_code == 0, result.output
    forest = json.loads(out.read_text(encoding="utf-8"))
    assert forest[0]["tag"] == "HEAD"
    assert forest[1]["pointer"] == "@I1@"


def test_export_to_stdout() -> None:
    result = runner.invoke(app, ["export", str(mock_file_path("head_only.ged"))])

    assert result.exit_code == 0, result.output
    [head] = json.loads(result.stdout)
    assert head["children"][3]["tag"] == "SUBM"


def test_export_custom_indent(tmp_path) -> None:
    out = tmp_path / "wide.json"
    result = runner.invoke(
        app, ["export", str(mock_file_path("head_only.ged")), "-o", str(out), "--indent", "4"]
    )

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").startswith('[\n    {\n        "data"')


def test_export_missing_file_fails(tmp_path) -> None:
    result = runner.invoke(app, ["export", str(tmp_path / "missing.ged")])
    assert result.exit_code != 0


def test_stats_table() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("sample.ged"))])

    assert result.exit_code == 0, result.output
    assert "Records" in result.stdout
    assert "26" in result.stdout
    assert "Orphaned" in result.stdout
    assert "HEAD" in result.stdout


def test_export_bad_level_reports_and_exits(tmp_path) -> None:
    src = tmp_path / "bad.ged"
    src.write_text("0 HEAD\n4294967296 NAME x\n", encoding="utf-8")
    out = tmp_path / "bad.json"

    result = runner.invoke(app, ["export", str(src), "--out", str(out)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "level out of range" in result.output
    assert not out.exists()


def test_stats_undecodable_input_reports_and_exits(tmp_path) -> None:
    src = tmp_path / "latin1.ged"
    src.write_bytes(b"0 HEAD\n1 NAME Jos\xe9\n")

    result = runner.invoke(app, ["stats", str(src)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_export_too_deep_reports_and_exits(tmp_path) -> None:
    src = tmp_path / "deep.ged"
    src.write_text("\n".join(f"{i} T{i}" for i in range(5000)), encoding="utf-8")

    result = runner.invoke(app, ["export", str(src), "--out", str(tmp_path / "deep.json")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "too deeply nested" in result.output
