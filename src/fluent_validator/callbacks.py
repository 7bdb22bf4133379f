"""Default run callback."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fluent_validator.context import ValidatorContext
    from fluent_validator.elements import ValidatorElement
    from fluent_validator.results import ValidationError

__all__ = ["DEFAULT_CALLBACK", "DefaultValidateCallback"]

logger = logging.getLogger(__name__)


class DefaultValidateCallback:
    """Callback that only logs. Holds no state, so one instance is shared.

    Subclass it to override a single hook:

        class RaisingCallback(DefaultValidateCallback):
            def on_uncaught_exception(self, context, validator, exception, target):
                raise exception
    """

    def on_success(
        self,
        context: ValidatorContext,
        elements: list[ValidatorElement],
    ) -> None:
        logger.info("Validate successfully")

    def on_fail(
        self,
        context: ValidatorContext,
        elements: list[ValidatorElement],
        errors: list[ValidationError],
    ) -> None:
        logger.error("Total errors: %d", len(errors))

    def on_uncaught_exception(
        self,
        context: ValidatorContext,
        validator: Any,
        exception: Exception,
        target: Any,
    ) -> None:
        logger.error(
            "Exception occurs: %s, validator: %s, target: %r",
            exception,
            type(validator).__name__,
            target,
        )


DEFAULT_CALLBACK = DefaultValidateCallback()
