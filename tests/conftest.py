"""Shared test fixtures for the Patchable test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and dependencies around each test."""
    from patchable.api.dependencies import get_demo_store, get_update_engine
    from patchable.config import get_settings
    from patchable.config.settings import set_toml_config

    get_settings.cache_clear()
    get_update_engine.cache_clear()
    get_demo_store.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    get_update_engine.cache_clear()
    get_demo_store.cache_clear()
    set_toml_config({})
