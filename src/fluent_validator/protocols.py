"""Validation protocols for type checking.

Capability protocols for validators, run callbacks and result collectors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from fluent_validator.context import ValidatorContext
    from fluent_validator.elements import ValidatorElement
    from fluent_validator.results import ValidationError, ValidationResult

T = TypeVar("T", contravariant=True)
R = TypeVar("R", covariant=True)

__all__ = ["ResultCollector", "ValidateCallBack", "ValidatorProtocol"]


@runtime_checkable
class ValidatorProtocol(Protocol[T]):
    """Protocol for validation implementations.

    Generic over T, the type of value being validated. On invalid input an
    implementation fills in ``error_info.error_msg``, calls
    ``context.add_error(error_info)`` and returns False. On valid input it
    returns True and leaves the context alone.

    ``on_exception`` is optional; the engine calls it when present.
    """

    def validate(
        self,
        context: ValidatorContext,
        target: T,
        error_info: ValidationError,
    ) -> bool:
        """Validate a value."""
        ...


@runtime_checkable
class ValidateCallBack(Protocol):
    """Hooks invoked around a FluentValidator run.

    Note:
        The engine calls ``on_success`` when the result has errors and
        ``on_fail`` when it has none. See FluentValidator.do_validate.
    """

    def on_success(
        self,
        context: ValidatorContext,
        elements: list[ValidatorElement],
    ) -> None:
        """Terminal hook for runs that recorded errors."""
        ...

    def on_fail(
        self,
        context: ValidatorContext,
        elements: list[ValidatorElement],
        errors: list[ValidationError],
    ) -> None:
        """Terminal hook for runs that recorded no errors."""
        ...

    def on_uncaught_exception(
        self,
        context: ValidatorContext,
        validator: Any,
        exception: Exception,
        target: Any,
    ) -> None:
        """Handle an exception raised by a validator.

        Raising from here aborts the whole run with ValidationAbortedError.
        """
        ...


@runtime_checkable
class ResultCollector(Protocol[R]):
    """Projection from a ValidationResult to an arbitrary output shape."""

    def to_result(self, result: ValidationResult) -> R:
        """Project the result."""
        ...
