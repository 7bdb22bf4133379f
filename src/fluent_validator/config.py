"""Engine configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["FluentValidatorConfig"]


class FluentValidatorConfig(BaseModel):
    """Settings used to build a FluentValidator.

    Attributes:
        fail_fast: Stop at the first failing element. Defaults to False.
        attributes: Initial attributes written to the validator context.

    Example:
        config = FluentValidatorConfig.model_validate(
            {"fail_fast": True, "attributes": {"source": "upload.csv"}}
        )
        validator = FluentValidator.from_config(config)
    """

    model_config = ConfigDict(extra="forbid")

    fail_fast: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)
