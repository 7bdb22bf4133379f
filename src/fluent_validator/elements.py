"""Registered units of validation work."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fluent_validator.protocols import ValidatorProtocol

__all__ = ["ValidatorElement"]


@dataclass(frozen=True)
class ValidatorElement:
    """One unit of work: a validator bound to a value and its position.

    Attributes:
        field_name: Name of the field, used in error messages.
        target: Value handed to the validator.
        line_number: Source line of the value, used in error messages.
        validator: Validator applied to ``target``.

    Example:
        element = ValidatorElement("age", row["age"], 12, NumericValidator())
    """

    field_name: str
    target: Any
    line_number: int
    validator: ValidatorProtocol[Any]
