"""Fluent validation engine with pluggable validators, callbacks and collectors."""

from fluent_validator.callbacks import DefaultValidateCallback
from fluent_validator.collectors import (
    GenericResult,
    ResultCollectors,
    SimpleResult,
    SimpleResultCollector,
)
from fluent_validator.config import FluentValidatorConfig
from fluent_validator.context import ValidatorContext
from fluent_validator.elements import ValidatorElement
from fluent_validator.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from fluent_validator.exceptions import ValidationAbortedError
from fluent_validator.fluent import FluentValidator
from fluent_validator.protocols import ResultCollector, ValidateCallBack, ValidatorProtocol
from fluent_validator.results import ValidationError, ValidationResult
from fluent_validator.rich_observers import RichSummaryObserver, SimpleProgressObserver
from fluent_validator.validators import (
    BaseValidator,
    NotEmptyValidator,
    NotNullValidator,
    NumericValidator,
    RegexValidator,
    is_empty,
)
from fluent_validator.writers import CSVErrorWriter, JSONLinesErrorWriter

__all__ = [
    # Engine
    "FluentValidator",
    "FluentValidatorConfig",
    "ValidationAbortedError",
    # Context and records
    "ValidatorContext",
    "ValidatorElement",
    "ValidationError",
    "ValidationResult",
    # Validators
    "BaseValidator",
    "NotEmptyValidator",
    "NotNullValidator",
    "NumericValidator",
    "RegexValidator",
    "ValidatorProtocol",
    "is_empty",
    # Callbacks
    "DefaultValidateCallback",
    "ValidateCallBack",
    # Result projection
    "GenericResult",
    "ResultCollector",
    "ResultCollectors",
    "SimpleResult",
    "SimpleResultCollector",
    # Output writers
    "CSVErrorWriter",
    "JSONLinesErrorWriter",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Rich observers
    "RichSummaryObserver",
    "SimpleProgressObserver",
]

__version__ = "0.1.0"
