"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from patchable.config import get_settings, reload_settings
from patchable.config.settings import Settings, set_toml_config


@pytest.fixture
def config_env(
    test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point the loader at an empty temporary config directory."""
    monkeypatch.setenv("PATCHABLE_CONFIG_DIR", str(test_config_dir))
    monkeypatch.setenv("PATCHABLE_ENV", "nonexistent")
    return test_config_dir


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.app_name == "patchable"
        assert settings.debug is False

    def test_engine_defaults(self) -> None:
        settings = Settings()
        assert settings.engine.validate_all_fields is False
        assert settings.engine.strict_coercion is True
        assert settings.engine.path_separator == "."

    def test_api_and_observability_defaults(self) -> None:
        settings = Settings()
        assert settings.api.seed_demo_models == 10
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.metrics.path == "/metrics"

    def test_toml_values_used(self) -> None:
        set_toml_config({"engine": {"path_separator": "/"}})
        assert Settings().engine.path_separator == "/"

    def test_constructor_arguments_win(self) -> None:
        set_toml_config({"app_name": "from-toml"})
        assert Settings(app_name="explicit").app_name == "explicit"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self, config_env: Path) -> None:
        (config_env / "default.toml").write_text("app_name = 'test'")

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.app_name == "test"

    def test_settings_cached(self, config_env: Path) -> None:
        (config_env / "default.toml").write_text("app_name = 'cached'")

        assert get_settings() is get_settings()

    def test_reload_settings_clears_cache(self, config_env: Path) -> None:
        default_toml = config_env / "default.toml"
        default_toml.write_text("app_name = 'original'")
        assert get_settings().app_name == "original"

        default_toml.write_text("app_name = 'updated'")

        assert reload_settings().app_name == "updated"

    def test_repository_config_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The shipped config directory produces valid settings."""
        config_dir = Path(__file__).resolve().parents[3] / "config"
        monkeypatch.setenv("PATCHABLE_CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("PATCHABLE_ENV", "development")

        settings = get_settings()
        assert settings.debug is True
        assert settings.observability.logging.format == "console"
        assert settings.engine.strict_coercion is True


class TestEnvironmentVariableOverrides:
    """Tests for environment variable configuration overrides."""

    def test_top_level_override(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (config_env / "default.toml").write_text("debug = false")
        monkeypatch.setenv("PATCHABLE_DEBUG", "true")

        assert get_settings().debug is True

    def test_nested_override(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested values can be overridden with double underscore."""
        (config_env / "default.toml").write_text("[engine]\nvalidate_all_fields = false")
        monkeypatch.setenv("PATCHABLE_ENGINE__VALIDATE_ALL_FIELDS", "true")

        assert get_settings().engine.validate_all_fields is True

    def test_deeply_nested_override(
        self, config_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (config_env / "default.toml").write_text("[observability.metrics]\nenabled = true")
        monkeypatch.setenv("PATCHABLE_OBSERVABILITY__METRICS__ENABLED", "false")

        assert get_settings().observability.metrics.enabled is False
