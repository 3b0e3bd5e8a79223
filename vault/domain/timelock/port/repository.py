from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from vault.domain.shared.port import Port
from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId


class TimelockRepository(Port, Protocol):
    """Record store plus the per-creator ownership index.

    The index only serves enumeration; access checks always go through the
    record's own ``creator``.
    """

    @abstractmethod
    async def insert(self, record: TimelockRecord) -> None: ...

    @abstractmethod
    async def get(self, id: TimelockId) -> TimelockRecord | None: ...

    @abstractmethod
    async def update(self, record: TimelockRecord) -> None: ...

    @abstractmethod
    async def append_to_index(self, owner: str, id: TimelockId) -> None: ...

    @abstractmethod
    async def list_for_owner(self, owner: str) -> List[TimelockId]:
        """Ids created by ``owner`` in creation order."""
        ...
