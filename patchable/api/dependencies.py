"""Dependency injection for API routes.

Dependencies are built from settings once per process and can be replaced
with ``app.dependency_overrides`` in tests.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from patchable.api.store import InMemoryDemoStore
from patchable.config import get_settings as _load_settings
from patchable.config.settings import Settings
from patchable.update.engine import UpdateEngine


def get_settings() -> Settings:
    """Settings for the running application."""
    return _load_settings()


@lru_cache(maxsize=1)
def get_update_engine() -> UpdateEngine:
    """Shared update engine configured from the engine settings section."""
    return UpdateEngine(_load_settings().engine)


@lru_cache(maxsize=1)
def get_demo_store() -> InMemoryDemoStore:
    """Process-wide demo store, seeded on first use."""
    return InMemoryDemoStore.seeded(_load_settings().api.seed_demo_models)


SettingsDep = Annotated[Settings, Depends(get_settings)]
UpdateEngineDep = Annotated[UpdateEngine, Depends(get_update_engine)]
DemoStoreDep = Annotated[InMemoryDemoStore, Depends(get_demo_store)]
