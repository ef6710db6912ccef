"""Root settings model for Patchable configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from patchable.config.models.api import APIConfig
from patchable.config.models.engine import EngineConfig
from patchable.config.models.observability import ObservabilityConfig

# TOML values handed to the settings source by get_settings()
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the loaded TOML files."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Precedence, lowest first:
    1. Pydantic model defaults
    2. config/default.toml
    3. config/{PATCHABLE_ENV}.toml
    4. PATCHABLE_* environment variables
    5. Constructor arguments
    """

    model_config = SettingsConfigDict(
        env_prefix="PATCHABLE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="patchable", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")

    engine: EngineConfig = Field(
        default_factory=EngineConfig,
        description="Update engine defaults",
    )
    api: APIConfig = Field(default_factory=APIConfig, description="Demo API configuration")
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
