"""In-memory demo model store.

Stands in for a repository. Writers take the per-id lock for the whole
read-update-save sequence so two requests never update the same instance
concurrently.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from uuid import UUID

from patchable.api.models.demo import DemoModel
from patchable.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass
class _LockEntry:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    users: int = 0


class InMemoryDemoStore:
    """Dictionary-backed store of DemoModel instances."""

    def __init__(self) -> None:
        self._models: dict[UUID, DemoModel] = {}
        self._locks: dict[UUID, _LockEntry] = {}

    @classmethod
    def seeded(cls, count: int) -> "InMemoryDemoStore":
        """Store holding ``count`` demo models named "0", "1", ..."""
        store = cls()
        for i in range(count):
            model = DemoModel(name=str(i))
            store._models[model.id] = model
        logger.info("demo_store_seeded", count=count)
        return store

    @asynccontextmanager
    async def lock(self, model_id: UUID) -> AsyncIterator[None]:
        """Exclusive access to one model id.

        The lock for an id only exists while some request holds or waits
        for it.
        """
        entry = self._locks.setdefault(model_id, _LockEntry())
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[model_id]

    async def list_all(self) -> list[DemoModel]:
        return list(self._models.values())

    async def get(self, model_id: UUID) -> DemoModel | None:
        return self._models.get(model_id)

    async def save(self, model: DemoModel) -> None:
        self._models[model.id] = model
        logger.debug("demo_model_saved", model_id=str(model.id))
