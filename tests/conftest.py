"""Shared fixtures, helper validators and Hypothesis strategies for tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import strategies as st

from fluent_validator import (
    BaseValidator,
    DefaultValidateCallback,
    FluentValidator,
    ValidationError,
    ValidationEvent,
    ValidationEventType,
    ValidatorContext,
)

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for valid field names (letters and numbers only)
field_names = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for line numbers
line_numbers = st.integers(min_value=0, max_value=100_000)

# Strategy for optional string values
optional_strings = st.one_of(st.none(), st.text(max_size=50))


# -----------------------------------------------------------------------------
# Test Validator Classes
# -----------------------------------------------------------------------------


class PassingValidator(BaseValidator[Any]):
    """Validator that always passes and counts its calls."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def validate(
        self, context: ValidatorContext, target: Any, error_info: ValidationError
    ) -> bool:
        self.calls += 1
        return True


class FailingValidator(BaseValidator[Any]):
    """Validator that always fails, records its error and counts its calls."""

    def __init__(self, message: str = "Failed") -> None:
        super().__init__(message)
        self.calls = 0

    def validate(
        self, context: ValidatorContext, target: Any, error_info: ValidationError
    ) -> bool:
        self.calls += 1
        error_info.error_msg = f"{error_info.field_name}: {self.message}"
        context.add_error(error_info)
        return False


class SilentFailingValidator(BaseValidator[Any]):
    """Validator that returns False without recording an error."""

    def validate(
        self, context: ValidatorContext, target: Any, error_info: ValidationError
    ) -> bool:
        return False


class RaisingValidator(BaseValidator[Any]):
    """Validator whose validate raises; remembers on_exception calls."""

    def __init__(self, exc: Exception | None = None) -> None:
        super().__init__()
        self.exc = exc or ValueError("boom")
        self.handled: list[tuple[Exception, Any]] = []

    def validate(
        self, context: ValidatorContext, target: Any, error_info: ValidationError
    ) -> bool:
        raise self.exc

    def on_exception(self, exception: Exception, context: ValidatorContext, target: Any) -> None:
        self.handled.append((exception, target))


class AttributeValidator(BaseValidator[Any]):
    """Validator that passes only if the target equals a context attribute."""

    def __init__(self, key: str) -> None:
        super().__init__()
        self.key = key

    def validate(
        self, context: ValidatorContext, target: Any, error_info: ValidationError
    ) -> bool:
        if target != context.get_attribute(self.key):
            error_info.error_msg = f"{error_info.field_name} does not match {self.key}"
            context.add_error(error_info)
            return False
        return True


# -----------------------------------------------------------------------------
# Test Callbacks and Observers
# -----------------------------------------------------------------------------


class RecordingCallback(DefaultValidateCallback):
    """Callback that records which hooks fired and with what."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def on_success(self, context: Any, elements: Any) -> None:
        self.calls.append(("on_success", (context, elements)))

    def on_fail(self, context: Any, elements: Any, errors: Any) -> None:
        self.calls.append(("on_fail", (context, elements, errors)))

    def on_uncaught_exception(
        self, context: Any, validator: Any, exception: Exception, target: Any
    ) -> None:
        self.calls.append(("on_uncaught_exception", (context, validator, exception, target)))

    @property
    def hook_names(self) -> list[str]:
        return [name for name, _ in self.calls]


class EscalatingCallback(RecordingCallback):
    """Callback whose exception hook raises."""

    def on_uncaught_exception(
        self, context: Any, validator: Any, exception: Exception, target: Any
    ) -> None:
        super().on_uncaught_exception(context, validator, exception, target)
        raise RuntimeError(f"escalated: {exception}")


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ValidationEvent] = []

    def on_event(self, event: ValidationEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ValidationEventType]:
        return [e.event_type for e in self.events]

    def of_type(self, event_type: ValidationEventType) -> list[ValidationEvent]:
        return [e for e in self.events if e.event_type == event_type]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def engine() -> FluentValidator:
    """Create a fresh FluentValidator."""
    return FluentValidator()


@pytest.fixture
def context() -> ValidatorContext:
    """Create a fresh ValidatorContext."""
    return ValidatorContext()


@pytest.fixture
def error_info() -> ValidationError:
    """Create a placeholder error for field 'amount' on line 7."""
    return ValidationError(field_name="amount", line_number=7)


@pytest.fixture
def callback() -> RecordingCallback:
    """Create a RecordingCallback."""
    return RecordingCallback()


@pytest.fixture
def observer() -> RecordingObserver:
    """Create a RecordingObserver."""
    return RecordingObserver()
