"""Validation result containers.

Mutable error records and the result accumulator shared by every run of a
FluentValidator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["ValidationError", "ValidationResult"]


@dataclass
class ValidationError:
    """A single validation error.

    The engine builds one of these per element before invoking the
    validator, pre-filled with the element's positional metadata. A failing
    validator fills in ``error_msg`` and records it through the context.

    Attributes:
        field_name: Name of the field being validated.
        target: The offending value.
        line_number: Source line the value came from.
        error_msg: Human readable message. Empty until a validator fails.
    """

    field_name: str | None = None
    target: Any = None
    line_number: int = 0
    error_msg: str = ""

    @classmethod
    def create(cls, error_msg: str) -> ValidationError:
        """Create an error carrying only a message."""
        return cls(error_msg=error_msg)

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dict for downstream consumers."""
        return {
            "field_name": self.field_name,
            "target": self.target,
            "line_number": self.line_number,
            "error_msg": self.error_msg,
        }


@dataclass
class ValidationResult:
    """Accumulated outcome of one or more validation runs.

    ``success`` starts out True and flips to False as soon as an error is
    added. Errors keep the order in which they were recorded. Nothing here
    is ever cleared automatically.
    """

    success: bool = True
    errors: list[ValidationError] = field(default_factory=list)
    time_elapsed_ms: float = 0.0

    def add_error(self, error: ValidationError) -> None:
        """Record an error and mark the result as failed."""
        self.errors.append(error)
        self.success = False

    @property
    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of recorded errors."""
        return len(self.errors)

    @property
    def messages(self) -> list[str]:
        """Get the error messages in recording order."""
        return [e.error_msg for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain dict, errors in recording order."""
        return {
            "success": self.success,
            "errors": [e.to_dict() for e in self.errors],
            "time_elapsed_ms": self.time_elapsed_ms,
        }
