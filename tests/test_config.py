"""Tests for FluentValidatorConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluent_validator import FluentValidatorConfig


class TestFluentValidatorConfig:
    """Tests for the engine configuration model."""

    def test_defaults(self) -> None:
        config = FluentValidatorConfig()

        assert config.fail_fast is False
        assert config.attributes == {}

    def test_from_dict(self) -> None:
        config = FluentValidatorConfig.model_validate(
            {"fail_fast": True, "attributes": {"source": "upload.csv", "limit": 10}}
        )

        assert config.fail_fast is True
        assert config.attributes == {"source": "upload.csv", "limit": 10}

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            FluentValidatorConfig.model_validate({"fail_fastt": True})

    def test_rejects_bad_types(self) -> None:
        with pytest.raises(ValidationError):
            FluentValidatorConfig.model_validate({"attributes": ["not", "a", "dict"]})

    def test_defaults_not_shared(self) -> None:
        first = FluentValidatorConfig()
        first.attributes["k"] = 1

        assert FluentValidatorConfig().attributes == {}
