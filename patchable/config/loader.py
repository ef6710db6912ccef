"""TOML configuration loader with deep merge support."""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "PATCHABLE_CONFIG_DIR"
ENVIRONMENT_ENV = "PATCHABLE_ENV"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Locate the configuration directory.

    ``PATCHABLE_CONFIG_DIR`` wins when set and must exist. Otherwise the
    nearest ``config/`` directory from the working directory upwards is
    used, falling back to a relative ``config`` path.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    current = Path.cwd()
    for _ in range(5):
        candidate = current / "config"
        if candidate.is_dir():
            return candidate
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Current environment name from PATCHABLE_ENV."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Tables merge recursively; any other value in ``override`` replaces the
    one in ``base``. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Load ``default.toml`` and overlay ``{environment}.toml`` if present.

    Args:
        config_dir: Directory holding the TOML files (discovered if omitted)
        environment: Environment overlay name (PATCHABLE_ENV if omitted)

    Returns:
        Merged configuration dictionary
    """
    config_dir = config_dir or get_config_dir()
    environment = environment or get_environment()

    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    config = load_toml(default_path)

    overlay_path = config_dir / f"{environment}.toml"
    if overlay_path.exists():
        config = deep_merge(config, load_toml(overlay_path))

    return config
