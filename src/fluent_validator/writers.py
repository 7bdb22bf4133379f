"""Output writers for validation errors.

Collectors that export the errors of a ValidationResult to CSV and JSON
Lines files. Pass them to ``FluentValidator.result``; they return the
number of errors written.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fluent_validator.results import ValidationResult

__all__ = ["CSVErrorWriter", "JSONLinesErrorWriter"]

ERROR_COLUMNS = ["field_name", "line_number", "target", "error_msg"]


class CSVErrorWriter:
    """Write validation errors to a CSV file, one row per error.

    Example:
        count = engine.do_validate().result(CSVErrorWriter("errors.csv"))
        print(f"Wrote {count} errors")
    """

    def __init__(self, path: str | Path, *, include_target: bool = True) -> None:
        """Initialize the CSV writer.

        Args:
            path: Path to the output CSV file.
            include_target: If True, include the offending value column.
        """
        self._path = Path(path)
        self._include_target = include_target

    @property
    def fieldnames(self) -> list[str]:
        """Columns written to the file."""
        if self._include_target:
            return list(ERROR_COLUMNS)
        return [c for c in ERROR_COLUMNS if c != "target"]

    def to_result(self, result: ValidationResult) -> int:
        """Write every error of the result.

        Args:
            result: The result to export.

        Returns:
            Number of rows written.
        """
        with open(self._path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.fieldnames, extrasaction="ignore")
            writer.writeheader()
            for error in result.errors:
                writer.writerow(error.to_dict())
        return len(result.errors)


class JSONLinesErrorWriter:
    """Write validation errors to a JSON Lines file.

    Each line is a complete JSON object with the error's field name, line
    number, target and message. Values that are not JSON serializable are
    written as strings.
    """

    def __init__(self, path: str | Path, *, indent: int | None = None) -> None:
        """Initialize the JSON Lines writer.

        Args:
            path: Path to the output file.
            indent: JSON indentation (None for compact, int for pretty).
        """
        self._path = Path(path)
        self._indent = indent

    def to_result(self, result: ValidationResult) -> int:
        """Write every error of the result.

        Args:
            result: The result to export.

        Returns:
            Number of lines written.
        """
        with open(self._path, "w", encoding="utf-8") as f:
            for error in result.errors:
                f.write(json.dumps(error.to_dict(), indent=self._indent, default=str) + "\n")
        return len(result.errors)
