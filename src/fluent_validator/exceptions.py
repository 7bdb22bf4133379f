"""Exceptions raised by the validation engine."""

from __future__ import annotations

from typing import Any

__all__ = ["ValidationAbortedError"]


class ValidationAbortedError(RuntimeError):
    """The engine itself failed and the run was aborted.

    Raised from ``FluentValidator.do_validate`` when a callback's
    ``on_uncaught_exception`` hook raises. This is unrelated to
    ValidationError, which describes invalid data. Errors recorded before
    the abort remain in the shared result.

    Attributes:
        cause: The exception raised by the callback.
        validator: The validator whose ``validate`` raised first.
        target: The value that was being validated.
    """

    def __init__(
        self,
        cause: Exception,
        *,
        validator: Any = None,
        target: Any = None,
    ) -> None:
        super().__init__(f"Validation aborted: {cause}")
        self.cause = cause
        self.validator = validator
        self.target = target
