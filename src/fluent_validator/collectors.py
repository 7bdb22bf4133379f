"""Result projections.

Pydantic report models and the collectors that build them from a
ValidationResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from fluent_validator.results import ValidationResult

__all__ = ["GenericResult", "ResultCollectors", "SimpleResult", "SimpleResultCollector"]

E = TypeVar("E")


class GenericResult(BaseModel, Generic[E]):
    """Flattened validation report.

    Attributes:
        success: Whether the validated data had no errors.
        errors: Projected errors in recording order.
    """

    success: bool = True
    errors: list[E] = Field(default_factory=list)

    @property
    def error_number(self) -> int:
        """Get the number of errors in the report."""
        return len(self.errors)


class SimpleResult(GenericResult[str]):
    """Report whose errors are plain messages."""


class SimpleResultCollector:
    """Project a ValidationResult into a SimpleResult.

    Messages are only copied when the result is unsuccessful.

    Example:
        report = engine.do_validate().result(SimpleResultCollector())
        # SimpleResult(success=False, errors=["Line: 3, name could not be null. "])
    """

    def to_result(self, result: ValidationResult) -> SimpleResult:
        if result.success:
            return SimpleResult(success=True)
        return SimpleResult(success=False, errors=result.messages)


class ResultCollectors:
    """Factory for the built-in collectors."""

    @staticmethod
    def to_simple() -> SimpleResultCollector:
        """Collector producing a SimpleResult."""
        return SimpleResultCollector()
