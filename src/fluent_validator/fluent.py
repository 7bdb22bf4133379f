"""Fluent validation engine.

FluentValidator registers validator elements, runs them in order under a
fail-fast or fail-over policy, contains validator exceptions and projects
the accumulated result through a collector.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from fluent_validator.callbacks import DEFAULT_CALLBACK
from fluent_validator.context import ValidatorContext
from fluent_validator.elements import ValidatorElement
from fluent_validator.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
)
from fluent_validator.exceptions import ValidationAbortedError
from fluent_validator.results import ValidationError, ValidationResult

if TYPE_CHECKING:
    from fluent_validator.config import FluentValidatorConfig
    from fluent_validator.protocols import (
        ResultCollector,
        ValidateCallBack,
        ValidatorProtocol,
    )

__all__ = ["FluentValidator"]

R = TypeVar("R")

logger = logging.getLogger(__name__)


class FluentValidator(ObservableMixin):
    """Chain-of-responsibility validation engine with a fluent interface.

    Elements run in registration order. Under fail-over (the default) every
    element is attempted; under fail-fast the run stops at the first element
    whose validator returns False. Errors accumulate in the context's
    ValidationResult, which is never cleared between runs.

    Supports the Observer pattern - add observers to receive
    VALIDATION_STARTED, ELEMENT_VALIDATED, ERROR_ADDED, VALIDATION_COMPLETED
    and VALIDATION_ABORTED events.

    Example:
        from fluent_validator import (
            FluentValidator,
            NotNullValidator,
            NumericValidator,
            ResultCollectors,
        )

        result = (
            FluentValidator()
            .on("name", row["name"], 3, NotNullValidator())
            .on("amount", row["amount"], 3, NumericValidator())
            .fail_fast()
            .do_validate()
            .result(ResultCollectors.to_simple())
        )
        if not result.success:
            print(result.errors)
    """

    def __init__(self) -> None:
        self._elements: list[ValidatorElement] = []
        self._context = ValidatorContext()
        self._result = self._context.result
        self._fail_fast = False

    @classmethod
    def new_instance(cls) -> FluentValidator:
        """Create an engine with an empty registry and its own context."""
        return cls()

    @classmethod
    def from_config(cls, config: FluentValidatorConfig) -> FluentValidator:
        """Create an engine from a FluentValidatorConfig.

        Args:
            config: Policy and initial context attributes.

        Returns:
            A configured FluentValidator.
        """
        engine = cls().set_fail_fast(config.fail_fast)
        for key, value in config.attributes.items():
            engine.put_attribute_to_context(key, value)
        return engine

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def put_attribute_to_context(self, key: str, value: Any) -> FluentValidator:
        """Write an attribute visible to every validator in later runs.

        Args:
            key: Attribute name.
            value: Attribute value.

        Returns:
            Self for method chaining.
        """
        self._context.set_attribute(key, value)
        return self

    def with_context(self, context: ValidatorContext) -> FluentValidator:
        """Accumulate into a caller-supplied context instead of our own.

        The context's result then belongs to the caller, which allows
        several engines or several runs to share one result.

        Args:
            context: The context to adopt.

        Returns:
            Self for method chaining.
        """
        self._context = context
        self._result = context.result
        return self

    def fail_fast(self) -> FluentValidator:
        """Stop at the first failing element."""
        self._fail_fast = True
        return self

    def fail_over(self) -> FluentValidator:
        """Run every element regardless of earlier failures (default)."""
        self._fail_fast = False
        return self

    def set_fail_fast(self, enabled: bool) -> FluentValidator:
        """Set the policy explicitly.

        Args:
            enabled: True for fail-fast, False for fail-over.

        Returns:
            Self for method chaining.
        """
        self._fail_fast = enabled
        return self

    @property
    def is_fail_fast(self) -> bool:
        """Whether the fail-fast policy is active."""
        return self._fail_fast

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def on(
        self,
        element: ValidatorElement | Iterable[ValidatorElement] | str | None,
        target: Any = None,
        line_number: int = 0,
        validator: ValidatorProtocol[Any] | None = None,
    ) -> FluentValidator:
        """Register one element, several elements, or a field to validate.

        Accepts a ValidatorElement, an iterable of them (None or empty is a
        no-op), or a field name followed by target, line number and
        validator.

        Returns:
            Self for method chaining.

        Raises:
            TypeError: If a field name is given without a validator, or the
                first argument is none of the accepted forms.

        Example:
            engine.on(ValidatorElement("id", "42", 1, NumericValidator()))
            engine.on([element_a, element_b])
            engine.on("id", "42", 1, NumericValidator())
        """
        if element is None:
            return self
        if isinstance(element, ValidatorElement):
            self._elements.append(element)
        elif isinstance(element, str):
            if validator is None:
                raise TypeError(f"No validator given for field {element!r}")
            self._elements.append(ValidatorElement(element, target, line_number, validator))
        elif isinstance(element, Iterable):
            self._elements.extend(element)
        else:
            raise TypeError(
                "on() expects a ValidatorElement, an iterable of ValidatorElement or a field "
                f"name, got {type(element).__name__}"
            )
        return self

    @property
    def elements(self) -> list[ValidatorElement]:
        """Get copy of the registered elements."""
        return self._elements.copy()

    @property
    def context(self) -> ValidatorContext:
        """The context validators run against."""
        return self._context

    @property
    def validation_result(self) -> ValidationResult:
        """The result being accumulated."""
        return self._result

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def do_validate(self, callback: ValidateCallBack | None = None) -> FluentValidator:
        """Run every registered element in order under the current policy.

        A validator returning False marks the result as failed; the validator
        itself records the error. A validator raising is passed to its own
        ``on_exception`` and then to ``callback.on_uncaught_exception``, and
        the run continues. If that callback raises, the run is aborted.

        Elapsed time is stored on the result whether the run completes or
        aborts. On completion exactly one terminal hook fires: ``on_success``
        when the result has errors, ``on_fail`` when it has none. The names
        read backwards; existing callers rely on this order.

        Args:
            callback: Run callback. Defaults to DefaultValidateCallback.

        Returns:
            Self for method chaining.

        Raises:
            ValidationAbortedError: If ``on_uncaught_exception`` raised.
        """
        if not self._elements:
            logger.info("No elements to validate")
            return self

        callback = callback if callback is not None else DEFAULT_CALLBACK
        elements = self._elements.copy()
        logger.info("Start validation, total elements: %d", len(elements))
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_STARTED,
                source=self,
                data={"element_count": len(elements), "fail_fast": self._fail_fast},
            )
        )

        start_time = time.perf_counter()
        validated = 0
        try:
            for index, element in enumerate(elements):
                validated += 1
                if not self._validate_element(index, element, callback):
                    break
        except ValidationAbortedError as e:
            self.notify(
                ValidationEvent(
                    event_type=ValidationEventType.VALIDATION_ABORTED,
                    source=self,
                    data={
                        "validated": validated,
                        "exception": e,
                        "duration_ms": (time.perf_counter() - start_time) * 1000,
                    },
                )
            )
            raise
        else:
            if self._result.has_errors:
                callback.on_success(self._context, elements)
            else:
                callback.on_fail(self._context, elements, self._result.errors)
        finally:
            self._result.time_elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "End validation, validated=%d, costing %.2fms with success=%s",
                validated,
                self._result.time_elapsed_ms,
                self._result.success,
            )

        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                data={
                    "validated": validated,
                    "success": self._result.success,
                    "error_count": self._result.error_count,
                    "duration_ms": self._result.time_elapsed_ms,
                },
            )
        )
        return self

    def _validate_element(
        self,
        index: int,
        element: ValidatorElement,
        callback: ValidateCallBack,
    ) -> bool:
        """Run one element. Returns False when the run must stop here."""
        validator = element.validator
        target = element.target
        error_info = ValidationError(
            field_name=element.field_name,
            target=target,
            line_number=element.line_number,
        )
        errors_before = self._result.error_count
        passed = True
        raised = False
        try:
            passed = validator.validate(self._context, target, error_info)
        except Exception as e:
            raised = True
            on_exception = getattr(validator, "on_exception", None)
            if on_exception is not None:
                on_exception(e, self._context, target)
            try:
                callback.on_uncaught_exception(self._context, validator, e, target)
            except Exception as ex:
                logger.error(
                    "Validation aborted at field %s (line %d): %s",
                    element.field_name,
                    element.line_number,
                    ex,
                )
                raise ValidationAbortedError(ex, validator=validator, target=target) from ex
        else:
            if not passed:
                self._result.success = False
        finally:
            self._notify_element(index, element, passed, raised, errors_before)

        return passed or not self._fail_fast

    def _notify_element(
        self,
        index: int,
        element: ValidatorElement,
        passed: bool,
        raised: bool,
        errors_before: int,
    ) -> None:
        new_errors = self._result.errors[errors_before:]
        for error in new_errors:
            self.notify(
                ValidationEvent(
                    event_type=ValidationEventType.ERROR_ADDED,
                    source=self,
                    data={
                        "field_name": error.field_name,
                        "line_number": error.line_number,
                        "message": error.error_msg,
                    },
                )
            )
        self.notify(
            ValidationEvent(
                event_type=ValidationEventType.ELEMENT_VALIDATED,
                source=self,
                data={
                    "index": index,
                    "field_name": element.field_name,
                    "line_number": element.line_number,
                    "passed": passed,
                    "raised": raised,
                    "error_count": len(new_errors),
                },
            )
        )

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def result(self, collector: ResultCollector[R]) -> R:
        """Project the current result through a collector.

        Args:
            collector: Any object with ``to_result(ValidationResult)``.

        Returns:
            Whatever the collector produces.
        """
        return collector.to_result(self._result)

    def __len__(self) -> int:
        """Return number of registered elements."""
        return len(self._elements)

    def __repr__(self) -> str:
        return (
            f"FluentValidator(elements={len(self._elements)}, "
            f"fail_fast={self._fail_fast}, errors={self._result.error_count})"
        )
