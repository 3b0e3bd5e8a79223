"""Tests for SqlTimelockRepository against in-memory SQLite."""

import pytest
import pytest_asyncio

from vault.config import StoreBackend, StoreConfig
from vault.domain.auth.model.identity import Principal
from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId
from vault.infrastructure.persistence.database import (
    _expand_sqlite_path,
    create_db_engine,
    create_session_factory,
    create_tables,
)
from vault.infrastructure.persistence.repository.timelock import SqlTimelockRepository


@pytest_asyncio.fixture
async def session_factory():
    engine = create_db_engine(
        StoreConfig(backend=StoreBackend.SQL, database_url="sqlite+aiosqlite:///:memory:")
    )
    await create_tables(engine)
    yield create_session_factory(engine)
    await engine.dispose()


def _record(id: TimelockId, unlock_time: int = 10) -> TimelockRecord:
    return TimelockRecord.create(
        id=id,
        creator=Principal(identity="alice"),
        title="Note",
        content="draft",
        unlock_time=unlock_time,
    )


class TestSqlTimelockRepository:
    @pytest.mark.asyncio
    async def test_insert_then_get(self, session_factory):
        id = TimelockId.generate("alice", 1)
        async with session_factory() as session:
            repo = SqlTimelockRepository(session)
            await repo.insert(_record(id, unlock_time=1_700_000_000_000))
            await session.commit()

        async with session_factory() as session:
            record = await SqlTimelockRepository(session).get(id)

        assert record == _record(id, unlock_time=1_700_000_000_000)

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, session_factory):
        async with session_factory() as session:
            assert await SqlTimelockRepository(session).get(TimelockId("missing")) is None

    @pytest.mark.asyncio
    async def test_update_replaces_content_only(self, session_factory):
        id = TimelockId.generate("alice", 1)
        async with session_factory() as session:
            repo = SqlTimelockRepository(session)
            await repo.insert(_record(id))

            record = await repo.get(id)
            record.replace_content("ciphertext")
            record.title = "ignored"
            await repo.update(record)
            await session.commit()

        async with session_factory() as session:
            stored = await SqlTimelockRepository(session).get(id)

        assert stored.content == "ciphertext"
        assert stored.title == "Note"

    @pytest.mark.asyncio
    async def test_list_for_owner_in_insertion_order(self, session_factory):
        ids = [TimelockId(f"timelock_alice_1_{n}") for n in "cab"]
        async with session_factory() as session:
            repo = SqlTimelockRepository(session)
            for id in ids:
                await repo.append_to_index("alice", id)
            await repo.append_to_index("bob", TimelockId("timelock_bob_1_x"))
            await session.commit()

        async with session_factory() as session:
            repo = SqlTimelockRepository(session)
            assert await repo.list_for_owner("alice") == ids
            assert await repo.list_for_owner("carol") == []


class TestExpandSqlitePath:
    def test_memory_url_unchanged(self):
        assert _expand_sqlite_path("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"

    def test_non_sqlite_url_unchanged(self):
        url = "postgresql+asyncpg://u:p@host/db"
        assert _expand_sqlite_path(url) == url

    def test_relative_path_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        url = _expand_sqlite_path("sqlite+aiosqlite:///data/vault.db")

        assert url == f"sqlite+aiosqlite:///{tmp_path / 'data' / 'vault.db'}"
        assert (tmp_path / "data").is_dir()
