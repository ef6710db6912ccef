"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from patchable.config.models import (
    APIConfig,
    EngineConfig,
    LoggingConfig,
    ObservabilityConfig,
)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_empty_path_separator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EngineConfig(path_separator="")

    def test_overrides(self) -> None:
        config = EngineConfig(validate_all_fields=True, strict_coercion=False)
        assert config.validate_all_fields is True
        assert config.strict_coercion is False


class TestAPIConfig:
    """Tests for APIConfig."""

    def test_cors_origins_not_shared(self) -> None:
        first = APIConfig()
        first.cors_origins.append("http://example.com")
        assert APIConfig().cors_origins == ["*"]

    @pytest.mark.parametrize("count", [-1, 1001])
    def test_seed_count_bounds(self, count: int) -> None:
        with pytest.raises(ValidationError):
            APIConfig(seed_demo_models=count)


class TestObservabilityConfig:
    """Tests for observability configuration."""

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]

    def test_nested_from_dict(self) -> None:
        config = ObservabilityConfig.model_validate(
            {"logging": {"format": "console"}, "metrics": {"enabled": False}}
        )
        assert config.logging.format == "console"
        assert config.logging.level == "INFO"
        assert config.metrics.enabled is False
