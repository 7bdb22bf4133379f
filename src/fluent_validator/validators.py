"""Abstract base validator and the built-in field validators.

Provides a generic base class for writing validators plus ready-made
validators for null checks, empty strings, regular expressions and numbers.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from fluent_validator.context import ValidatorContext
    from fluent_validator.results import ValidationError

__all__ = [
    "BaseValidator",
    "NotEmptyValidator",
    "NotNullValidator",
    "NumericValidator",
    "RegexValidator",
    "is_empty",
]

T = TypeVar("T")

NUMERIC_PATTERN = r"[+-]?\d+(\.\d+)?([eE][+-]?\d+)?"


def is_empty(value: Any) -> bool:
    """Check whether a value counts as null.

    None, empty strings and bytes, and empty sized containers are empty.
    Anything else, including 0 and False, is not.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


class BaseValidator(ABC, Generic[T]):
    """Abstract base class for validators.

    Generic over T, the type of value being validated. Subclasses implement
    ``validate`` and, on failure, record the pre-built error through the
    context before returning False.

    Example:
        from fluent_validator import BaseValidator

        class PositiveValidator(BaseValidator[int]):
            def validate(self, context, target, error_info):
                if target is not None and target <= 0:
                    return self._fail(
                        context,
                        error_info,
                        f"Line: {error_info.line_number}, "
                        f"{error_info.field_name} must be positive.",
                    )
                return True
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the validator.

        Args:
            message: Custom text appended to every error message.
        """
        self.message = message

    @property
    def name(self) -> str:
        """Name of this validator for logging and identification."""
        return self.__class__.__name__

    @abstractmethod
    def validate(
        self,
        context: ValidatorContext,
        target: T,
        error_info: ValidationError,
    ) -> bool:
        """Validate a value.

        Args:
            context: Shared context of the current run.
            target: Value to validate. Must not be mutated.
            error_info: Placeholder error pre-filled by the engine.

        Returns:
            True if the value is valid, False if an error was recorded.
        """
        ...

    def on_exception(
        self,
        exception: Exception,
        context: ValidatorContext,
        target: T,
    ) -> None:
        """Hook called when ``validate`` raises. Does nothing by default."""

    def _fail(
        self,
        context: ValidatorContext,
        error_info: ValidationError,
        text: str,
    ) -> bool:
        error_info.error_msg = f"{text} {self.message}"
        context.add_error(error_info)
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class NotNullValidator(BaseValidator[Any]):
    """Fails when the value is None or empty (see ``is_empty``)."""

    def validate(
        self,
        context: ValidatorContext,
        target: Any,
        error_info: ValidationError,
    ) -> bool:
        if is_empty(target):
            return self._fail(
                context,
                error_info,
                f"Line: {error_info.line_number}, {error_info.field_name} could not be null.",
            )
        return True


class NotEmptyValidator(BaseValidator[str]):
    """Fails when the string is None or has zero length."""

    def validate(
        self,
        context: ValidatorContext,
        target: str | None,
        error_info: ValidationError,
    ) -> bool:
        if target is None or len(target) == 0:
            return self._fail(
                context,
                error_info,
                f"Line: {error_info.line_number}, {error_info.field_name} could not be empty.",
            )
        return True


class RegexValidator(BaseValidator[str]):
    """Fails when a non-empty string does not fully match a pattern.

    None and empty strings always pass, whatever the pattern. Combine with
    NotEmptyValidator when the field is also required.

    Example:
        validator = RegexValidator(r"[A-Z]{3}", "Expected a currency code.")
    """

    def __init__(self, pattern: str = "", message: str = "", flags: int = 0) -> None:
        """Initialize the validator.

        Args:
            pattern: Regular expression the whole value must match.
            message: Custom text appended to every error message.
            flags: ``re`` flags used to compile the pattern.
        """
        super().__init__(message)
        self.pattern = pattern
        self._regex = re.compile(pattern, flags)

    def validate(
        self,
        context: ValidatorContext,
        target: str | None,
        error_info: ValidationError,
    ) -> bool:
        if target and self._regex.fullmatch(target) is None:
            return self._fail(
                context,
                error_info,
                f"Line: {error_info.line_number}, {error_info.field_name} could not match, "
                f"actual value: {target}.",
            )
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pattern={self.pattern!r}, message={self.message!r})"


class NumericValidator(RegexValidator):
    """Fails when a non-empty string is not a decimal number.

    Accepts an optional sign, a fractional part and an exponent, e.g.
    ``"-12.5"`` or ``"+3.14e-2"``. Only ASCII digits count. Empty values pass.
    """

    def __init__(self, message: str = "Expected numeric value.") -> None:
        super().__init__(NUMERIC_PATTERN, message, re.ASCII)
