"""Shared state passed to every validator during a run."""

from __future__ import annotations

from typing import Any

from fluent_validator.results import ValidationError, ValidationResult

__all__ = ["ValidatorContext"]


class ValidatorContext:
    """Per-run shared state: an attribute bag plus the result being built.

    The attribute bag is allocated on first write. A context keeps the same
    ValidationResult for its whole lifetime, so several engines (or several
    runs of one engine) can accumulate into it via
    ``FluentValidator.with_context``.

    Example:
        shared = ValidatorContext()
        shared.set_attribute("tenant", "acme")

        FluentValidator().with_context(shared).on(...).do_validate()
        FluentValidator().with_context(shared).on(...).do_validate()

        print(shared.result.errors)  # errors from both engines
    """

    def __init__(
        self,
        attributes: dict[str, Any] | None = None,
        result: ValidationResult | None = None,
    ) -> None:
        """Initialize the context.

        Args:
            attributes: Initial attribute bag. Defaults to unallocated.
            result: Result to accumulate into. A fresh one is created if None.
        """
        self._attributes = attributes
        self._result = result if result is not None else ValidationResult()

    @property
    def result(self) -> ValidationResult:
        """The result this context accumulates into."""
        return self._result

    @property
    def attributes(self) -> dict[str, Any] | None:
        """The attribute bag, or None if nothing has been written yet."""
        return self._attributes

    def add_error(self, error: ValidationError) -> None:
        """Record a validation error in the shared result."""
        self._result.add_error(error)

    def add_error_msg(self, msg: str) -> None:
        """Record an error that carries only a message."""
        self._result.add_error(ValidationError.create(msg))

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Look up an attribute, returning ``default`` when it is absent."""
        if not self._attributes:
            return default
        return self._attributes.get(key, default)

    def set_attribute(self, key: str, value: Any) -> None:
        """Write an attribute, allocating the bag on first use."""
        if self._attributes is None:
            self._attributes = {}
        self._attributes[key] = value

    def __repr__(self) -> str:
        keys = sorted(self._attributes) if self._attributes else []
        return f"ValidatorContext(attributes={keys!r}, errors={self._result.error_count})"
