from __future__ import annotations

from typing import List

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.port.repository import TimelockRepository
from vault.infrastructure.persistence.mappers.timelock import row_to_timelock, timelock_to_dict
from vault.infrastructure.persistence.tables import timelock_owners_table, timelocks_table


class SqlTimelockRepository(TimelockRepository):
    """SQLAlchemy implementation of TimelockRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, record: TimelockRecord) -> None:
        stmt = insert(timelocks_table).values(**timelock_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()

    async def get(self, id: TimelockId) -> TimelockRecord | None:
        stmt = select(timelocks_table).where(timelocks_table.c.id == str(id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_timelock(dict(row)) if row else None

    async def update(self, record: TimelockRecord) -> None:
        # Only content is mutable after creation
        stmt = (
            update(timelocks_table)
            .where(timelocks_table.c.id == str(record.id))
            .values(content=record.content)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def append_to_index(self, owner: str, id: TimelockId) -> None:
        stmt = insert(timelock_owners_table).values(owner=owner, timelock_id=str(id))
        await self.session.execute(stmt)
        await self.session.flush()

    async def list_for_owner(self, owner: str) -> List[TimelockId]:
        stmt = (
            select(timelock_owners_table.c.timelock_id)
            .where(timelock_owners_table.c.owner == owner)
            .order_by(timelock_owners_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [TimelockId(r) for r in result.scalars().all()]
