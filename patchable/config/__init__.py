"""Configuration loading for Patchable.

Configuration is read from TOML files with environment variable overrides.

Usage:
    from patchable.config import get_settings

    settings = get_settings()
    policy = settings.engine.validate_all_fields
"""

from functools import lru_cache

from patchable.config.loader import load_config
from patchable.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Cached for the lifetime of the process; call
    ``get_settings.cache_clear()`` or ``reload_settings()`` to reload.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
