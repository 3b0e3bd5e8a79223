from typing import AsyncIterable

from dishka import Provider, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from vault.config import Config
from vault.domain.shared.port.clock import Clock
from vault.domain.timelock.port.repository import TimelockRepository
from vault.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    create_tables,
)
from vault.infrastructure.persistence.memory import InMemoryTimelockRepository
from vault.infrastructure.persistence.repository.timelock import SqlTimelockRepository
from vault.infrastructure.shared.clock import SystemClock
from vault.util.di.scope import Scope


class ClockProvider(Provider):
    clock = provide(SystemClock, scope=Scope.APP, provides=Clock)


class MemoryPersistenceProvider(Provider):
    """One record store shared by every request for the life of the process."""

    timelock_repo = provide(
        InMemoryTimelockRepository,
        scope=Scope.APP,
        provides=TimelockRepository,
    )


class SqlPersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.store)
        await create_tables(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    timelock_repo = provide(SqlTimelockRepository, scope=Scope.UOW, provides=TimelockRepository)
