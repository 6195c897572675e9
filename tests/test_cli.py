"""Tests for the argmatch command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import argmatch.cli as cli
from argmatch.log_events import setup_logging


@pytest.fixture
def schema_path(tmp_path: Path) -> Path:
    path = tmp_path / "convert.json"
    path.write_text(
        json.dumps(
            {
                "positionals": [{"name": "file", "help": "input file"}],
                "optionals": [
                    {"flag": "-v", "name": "--verbose", "kind": "flag"},
                    {"flag": "-o", "name": "--output", "help": "output file"},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


def test_main_prints_match_as_json(
    schema_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(schema_path), "--argv", "-v input.txt -o 'out file.txt' extra"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "positionals": {"file": "input.txt"},
        "optionals": {"help": [], "verbose": ["true"], "output": ["out file.txt"]},
        "leftovers": ["extra"],
    }


def test_main_threads_own_leftovers_into_checked_tokens(
    schema_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(schema_path), "input.txt", "--argv", "-v tail"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["positionals"] == {"file": "input.txt"}
    assert payload["leftovers"] == ["tail"]


def test_main_reports_scan_errors_with_schema_prog(
    schema_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(schema_path), "--argv", "--verbose -o out"])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.strip() == "ERROR: convert: requires positional argument 'file'"


def test_main_prints_checked_interface_help(
    schema_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(schema_path), "--argv", "x --help"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: convert [options] <file>")
    assert "-o, --output OUTPUT" in out


def test_main_prints_own_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["--help"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: argmatch [options] <schema>")
    assert "-a, --argv ARGV" in out


def test_main_requires_schema_argument(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main([])

    assert exit_code == 1
    assert "argmatch: requires positional argument 'schema'" in capsys.readouterr().err


def test_main_reports_missing_schema_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(tmp_path / "missing.json")])

    assert exit_code == 1
    assert "ERROR: Could not read schema file" in capsys.readouterr().err


def test_main_reports_invalid_schema(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"positionals": "file"}', encoding="utf-8")

    exit_code = cli.main([str(path)])

    assert exit_code == 1
    assert "ERROR: Invalid schema file" in capsys.readouterr().err


def test_main_reports_declaration_conflicts(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "conflict.json"
    path.write_text(
        json.dumps({"optionals": [{"flag": "-h", "name": "--host"}]}),
        encoding="utf-8",
    )

    exit_code = cli.main([str(path)])

    assert exit_code == 1
    assert "duplicate flag name '-h'" in capsys.readouterr().err


def test_main_reports_unbalanced_quotes(
    schema_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main([str(schema_path), "--argv", "in 'unterminated"])

    assert exit_code == 1
    assert "ERROR: Could not split --argv" in capsys.readouterr().err


def test_main_writes_log_file(schema_path: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    try:
        exit_code = cli.main([str(schema_path), "in.txt", "--log-file", str(log_file)])
    finally:
        setup_logging(None)

    assert exit_code == 0
    text = log_file.read_text(encoding="utf-8")
    assert "=== scan_finished ===" in text
    assert "prog: convert" in text


def test_main_reports_unusable_log_file(
    schema_path: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    try:
        exit_code = cli.main(
            [str(schema_path), "in.txt", "--log-file", str(blocker / "run.log")]
        )
    finally:
        setup_logging(None)

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "ERROR: Could not open log file" in err
    assert "schema file" not in err
