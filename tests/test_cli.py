"""Tests for the runtime-validation command line tool."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from runtime_validation.cli import main
from runtime_validation.cli.run_validate import EXIT_INVALID, EXIT_LOAD_ERROR, EXIT_OK

SCHEMA = "name: string\nage: number\n"


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    # main() reconfigures the package logger for the captured streams
    monkeypatch.delenv("RUNTIME_VALIDATION_STRICT", raising=False)
    monkeypatch.delenv("RUNTIME_VALIDATION_LOG_LEVEL", raising=False)
    logger = logging.getLogger("runtime_validation")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _write(directory: Path, name: str, content: str) -> str:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def _run(argv) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_valid_document(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", SCHEMA)
    data = _write(tmp_path, "data.yaml", "name: John\nage: 30\n")

    assert _run(["--schema", schema, data]) == EXIT_OK
    assert "Validation succeeded with no errors." in capsys.readouterr().out


def test_invalid_document_reports_errors_with_lines(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", SCHEMA)
    data = _write(tmp_path, "data.yaml", "name: John\nage: '30'\n")

    assert _run(["--schema", schema, data]) == EXIT_INVALID

    out = capsys.readouterr().out
    assert (
        '1. at "age": Expected type number but received string '
        "(expected number, received string) [line 2, column 6]"
    ) in out


def test_permissive_flag(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", SCHEMA)
    data = _write(tmp_path, "data.yaml", "name: John\nage: 30\nemail: j@example.com\n")

    assert _run(["--schema", schema, data]) == EXIT_INVALID
    assert 'Unexpected property "email"' in capsys.readouterr().out

    assert _run(["--schema", schema, "--permissive", data]) == EXIT_OK


def test_json_output(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.json", '{"name": "string", "age": "number"}')
    good = _write(tmp_path, "good.json", '{"name": "a", "age": 1}')
    bad = _write(tmp_path, "bad.json", '{"name": 1, "age": 1}')

    assert _run(["--schema", schema, "--format", "json", good, bad]) == EXIT_INVALID

    output = json.loads(capsys.readouterr().out)
    assert output["files"] == 2
    assert output["errors"] == 1
    assert [r["valid"] for r in output["results"]] == [True, False]
    assert output["results"][1]["errors"][0]["path"] == "name"
    assert output["results"][1]["errors"][0]["code"] == "type_mismatch"


def test_github_actions_output(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", SCHEMA)
    data = _write(tmp_path, "data.yaml", "name: John\nage: '30'\n")

    assert _run(["--schema", schema, "--format", "github-actions", data]) == EXIT_INVALID
    assert capsys.readouterr().out.strip() == (
        f'::error file={data},line=2::at "age": Expected type number but received string'
    )


def test_missing_data_document(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", SCHEMA)

    assert _run(["--schema", schema, str(tmp_path / "missing.yaml")]) == EXIT_LOAD_ERROR
    assert "Document not found" in capsys.readouterr().out


def test_missing_schema_document(tmp_path: Path, capsys) -> None:
    data = _write(tmp_path, "data.yaml", "name: John\n")

    assert _run(["--schema", str(tmp_path / "missing.yaml"), data]) == EXIT_LOAD_ERROR
    assert capsys.readouterr().err.startswith("Error: Document not found")


def test_check_schema(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", "name: string\nage: integer\n")
    data = _write(tmp_path, "data.yaml", "name: John\nage: 30\n")

    assert _run(["--schema", schema, "--check-schema", data]) == EXIT_LOAD_ERROR
    assert "ERROR" in capsys.readouterr().err


def test_malformed_schema_without_check_is_reported_per_node(tmp_path: Path, capsys) -> None:
    schema = _write(tmp_path, "schema.yaml", "name: string\nage: integer\n")
    data = _write(tmp_path, "data.yaml", "name: John\nage: 30\n")

    assert _run(["--schema", schema, data]) == EXIT_INVALID
    assert "Invalid schema" in capsys.readouterr().out
