"""Tests for CSVErrorWriter and JSONLinesErrorWriter."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from fluent_validator import (
    CSVErrorWriter,
    FluentValidator,
    JSONLinesErrorWriter,
    NotNullValidator,
    NumericValidator,
    ResultCollector,
    ValidationResult,
)


def failing_engine() -> FluentValidator:
    """Engine with two failing elements and one passing one."""
    return (
        FluentValidator()
        .on("name", None, 1, NotNullValidator())
        .on("amount", "12", 2, NumericValidator())
        .on("count", "many", 3, NumericValidator())
        .do_validate()
    )


class TestCSVErrorWriter:
    """Tests for CSVErrorWriter."""

    def test_is_collector(self, tmp_path: Path) -> None:
        assert isinstance(CSVErrorWriter(tmp_path / "e.csv"), ResultCollector)

    def test_writes_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.csv"

        count = failing_engine().result(CSVErrorWriter(path))

        assert count == 2
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["field_name"] for r in rows] == ["name", "count"]
        assert rows[1]["line_number"] == "3"
        assert rows[1]["target"] == "many"
        assert "could not match" in rows[1]["error_msg"]

    def test_without_target(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.csv"
        writer = CSVErrorWriter(path, include_target=False)

        failing_engine().result(writer)

        with open(path, newline="", encoding="utf-8") as f:
            header = next(csv.reader(f))
        assert header == ["field_name", "line_number", "error_msg"]
        assert writer.fieldnames == header

    def test_empty_result_writes_header_only(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.csv"

        count = CSVErrorWriter(path).to_result(ValidationResult())

        assert count == 0
        assert path.read_text(encoding="utf-8").strip() == "field_name,line_number,target,error_msg"


class TestJSONLinesErrorWriter:
    """Tests for JSONLinesErrorWriter."""

    def test_writes_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.jsonl"

        count = failing_engine().result(JSONLinesErrorWriter(path))

        lines = path.read_text(encoding="utf-8").splitlines()
        assert count == 2
        assert len(lines) == 2
        first = json.loads(lines[0])
        assert first == {
            "field_name": "name",
            "target": None,
            "line_number": 1,
            "error_msg": "Line: 1, name could not be null. ",
        }

    def test_non_serializable_target(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.jsonl"
        marker = object()

        class AlwaysFail(NotNullValidator):
            def validate(self, context, target, error_info):  # type: ignore[no-untyped-def]
                return self._fail(context, error_info, "bad blob.")

        engine = FluentValidator().on("blob", marker, 2, AlwaysFail()).do_validate()

        JSONLinesErrorWriter(path).to_result(engine.validation_result)

        record = json.loads(path.read_text(encoding="utf-8").splitlines()[0])
        assert record["target"] == str(marker)

    def test_empty_result(self, tmp_path: Path) -> None:
        path = tmp_path / "errors.jsonl"

        assert JSONLinesErrorWriter(path).to_result(ValidationResult()) == 0
        assert path.read_text(encoding="utf-8") == ""
