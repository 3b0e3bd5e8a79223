"""Process-local record store."""

import asyncio
from typing import List

from vault.domain.shared.error import ConflictError, NotFoundError
from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.port.repository import TimelockRepository


class InMemoryTimelockRepository(TimelockRepository):
    """Keeps records and the ownership index in two dicts for the life of the process.

    Records are copied on the way in and out, so callers only change stored
    state through ``update``. Mutations are serialized by a lock.
    """

    def __init__(self) -> None:
        self._records: dict[TimelockId, TimelockRecord] = {}
        self._owners: dict[str, list[TimelockId]] = {}
        self._lock = asyncio.Lock()

    async def insert(self, record: TimelockRecord) -> None:
        async with self._lock:
            if record.id in self._records:
                raise ConflictError(f"Duplicate timelock id: {record.id}")
            self._records[record.id] = record.model_copy(deep=True)

    async def get(self, id: TimelockId) -> TimelockRecord | None:
        record = self._records.get(id)
        return record.model_copy(deep=True) if record is not None else None

    async def update(self, record: TimelockRecord) -> None:
        async with self._lock:
            if record.id not in self._records:
                raise NotFoundError(f"Timelock message not found: {record.id}")
            self._records[record.id] = record.model_copy(deep=True)

    async def append_to_index(self, owner: str, id: TimelockId) -> None:
        async with self._lock:
            self._owners.setdefault(owner, []).append(id)

    async def list_for_owner(self, owner: str) -> List[TimelockId]:
        return list(self._owners.get(owner, []))
