"""Unit tests for TimelockService."""

from unittest.mock import AsyncMock

import pytest

from vault.domain.auth.model.identity import Principal
from vault.domain.keys.model.value import KeyContext, KeyResponse
from vault.domain.shared.error import (
    AccessDeniedError,
    EmptyContentError,
    EmptyTitleError,
    InvalidUnlockTimeError,
    KeyServiceError,
    NotFoundError,
    NotYetUnlockableError,
)
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService
from vault.infrastructure.persistence.memory import InMemoryTimelockRepository

TRANSPORT_KEY = bytes.fromhex("0badcafe")


async def _create(service: TimelockService, caller: Principal, **overrides) -> TimelockId:
    now = service.clock.now()
    kwargs = dict(content="secret", unlock_time=now + 3600, title="My Note", caller=caller)
    kwargs.update(overrides)
    return await service.create(**kwargs)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_returns_fresh_ids(self, timelock_service, alice):
        ids = {await _create(timelock_service, alice) for _ in range(5)}
        assert len(ids) == 5

    @pytest.mark.asyncio
    async def test_id_carries_prefix_creator_and_timestamp(self, timelock_service, alice, clock):
        id = await _create(timelock_service, alice)
        assert str(id).startswith(f"timelock_alice_{clock.now()}_")

    @pytest.mark.asyncio
    async def test_create_stores_record_and_indexes_it(
        self, timelock_service, timelock_repo: InMemoryTimelockRepository, alice, clock
    ):
        id = await _create(timelock_service, alice, title="  My Note  ")

        record = await timelock_repo.get(id)
        assert record is not None
        assert record.creator == "alice"
        assert record.title == "My Note"
        assert record.content == "secret"
        assert record.unlock_time == clock.now() + 3600
        assert record.release_identity == f"timelock_{id}"
        assert await timelock_repo.list_for_owner("alice") == [id]

    @pytest.mark.asyncio
    async def test_unlock_time_equal_to_now_is_rejected(self, timelock_service, alice, clock):
        with pytest.raises(InvalidUnlockTimeError):
            await _create(timelock_service, alice, unlock_time=clock.now())

    @pytest.mark.asyncio
    async def test_unlock_time_in_past_is_rejected(self, timelock_service, alice, clock):
        with pytest.raises(InvalidUnlockTimeError):
            await _create(timelock_service, alice, unlock_time=clock.now() - 1)

    @pytest.mark.asyncio
    async def test_unlock_time_one_second_ahead_is_accepted(self, timelock_service, alice, clock):
        id = await _create(timelock_service, alice, unlock_time=clock.now() + 1)
        assert str(id).startswith("timelock_")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_is_rejected(self, timelock_service, alice, content):
        with pytest.raises(EmptyContentError):
            await _create(timelock_service, alice, content=content)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "  "])
    async def test_blank_title_is_rejected(self, timelock_service, alice, title):
        with pytest.raises(EmptyTitleError):
            await _create(timelock_service, alice, title=title)

    @pytest.mark.asyncio
    async def test_unlock_time_checked_before_content(self, timelock_service, alice, clock):
        with pytest.raises(InvalidUnlockTimeError):
            await _create(timelock_service, alice, content="", unlock_time=clock.now())

    @pytest.mark.asyncio
    async def test_failed_validation_writes_nothing(self, clock, alice):
        repo = AsyncMock()
        service = TimelockService(
            timelock_repo=repo,
            key_context_service=AsyncMock(),
            clock=clock,
        )
        with pytest.raises(EmptyContentError):
            await _create(service, alice, content="")

        repo.insert.assert_not_called()
        repo.append_to_index.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_content_leaves_listing_empty(self, timelock_service, alice, clock):
        with pytest.raises(EmptyContentError):
            await timelock_service.create("", clock.now() + 10, "t", alice)

        assert await timelock_service.list_mine(alice) == []


class TestAccessControl:
    @pytest.mark.asyncio
    async def test_non_creator_cannot_read_content(self, timelock_service, alice, bob):
        id = await _create(timelock_service, alice)
        with pytest.raises(AccessDeniedError):
            await timelock_service.get_content(id, bob)

    @pytest.mark.asyncio
    async def test_non_creator_cannot_read_release_identity(self, timelock_service, alice, bob):
        id = await _create(timelock_service, alice)
        with pytest.raises(AccessDeniedError):
            await timelock_service.get_release_identity(id, bob)

    @pytest.mark.asyncio
    async def test_non_creator_cannot_update_content(self, timelock_service, alice, bob):
        id = await _create(timelock_service, alice)
        with pytest.raises(AccessDeniedError):
            await timelock_service.update_content(id, "ciphertext", bob)

        assert await timelock_service.get_content(id, alice) == "secret"

    @pytest.mark.asyncio
    async def test_non_creator_cannot_request_key_even_after_unlock(
        self, timelock_service, key_service, alice, bob, clock
    ):
        id = await _create(timelock_service, alice)
        clock.current += 7200

        with pytest.raises(AccessDeniedError):
            await timelock_service.request_decryption_key(id, TRANSPORT_KEY, bob)
        key_service.derive_key.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        ["get_content", "get_release_identity", "update_content", "request_decryption_key"],
    )
    async def test_unknown_id_is_not_found(self, timelock_service, alice, operation):
        id = TimelockId("timelock_nobody_0_missing")
        args = {
            "get_content": (id, alice),
            "get_release_identity": (id, alice),
            "update_content": (id, "x", alice),
            "request_decryption_key": (id, TRANSPORT_KEY, alice),
        }[operation]

        with pytest.raises(NotFoundError, match="not found"):
            await getattr(timelock_service, operation)(*args)


class TestContent:
    @pytest.mark.asyncio
    async def test_get_content_returns_latest_update(self, timelock_service, alice):
        id = await _create(timelock_service, alice)

        assert await timelock_service.update_content(id, "ct-1", alice) is True
        assert await timelock_service.update_content(id, "ct-2", alice) is True
        assert await timelock_service.get_content(id, alice) == "ct-2"

    @pytest.mark.asyncio
    async def test_update_accepts_any_payload(self, timelock_service, alice):
        id = await _create(timelock_service, alice)
        await timelock_service.update_content(id, "", alice)
        assert await timelock_service.get_content(id, alice) == ""

    @pytest.mark.asyncio
    async def test_update_allowed_after_unlock(self, timelock_service, alice, clock):
        id = await _create(timelock_service, alice)
        clock.current += 7200
        await timelock_service.update_content(id, "late", alice)
        assert await timelock_service.get_content(id, alice) == "late"

    @pytest.mark.asyncio
    async def test_release_identity_is_stable(self, timelock_service, alice):
        id = await _create(timelock_service, alice)

        first = await timelock_service.get_release_identity(id, alice)
        second = await timelock_service.get_release_identity(id, alice)
        assert first == second == f"timelock_{id}"


class TestListMine:
    @pytest.mark.asyncio
    async def test_unknown_caller_gets_empty_list(self, timelock_service):
        assert await timelock_service.list_mine(Principal(identity="carol")) == []

    @pytest.mark.asyncio
    async def test_lists_own_records_in_creation_order(self, timelock_service, alice, bob, clock):
        first = await _create(timelock_service, alice, title="first")
        await _create(timelock_service, bob, title="bob's")
        second = await _create(timelock_service, alice, title="second", unlock_time=clock.now() + 5)

        items = await timelock_service.list_mine(alice)
        assert [i.id for i in items] == [first, second]
        assert [i.title for i in items] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_is_expired_tracks_clock(self, timelock_service, alice, clock):
        await _create(timelock_service, alice, unlock_time=clock.now() + 10)

        assert [i.is_expired for i in await timelock_service.list_mine(alice)] == [False]
        clock.current += 10
        assert [i.is_expired for i in await timelock_service.list_mine(alice)] == [True]

    @pytest.mark.asyncio
    async def test_unresolvable_ids_are_skipped(self, timelock_service, timelock_repo, alice):
        id = await _create(timelock_service, alice)
        await timelock_repo.append_to_index("alice", TimelockId("timelock_alice_0_gone"))

        items = await timelock_service.list_mine(alice)
        assert [i.id for i in items] == [id]


class TestRequestDecryptionKey:
    @pytest.mark.asyncio
    async def test_locked_record_is_not_unlockable(self, timelock_service, key_service, alice, clock):
        id = await _create(timelock_service, alice, unlock_time=clock.now() + 60)
        clock.current += 59

        with pytest.raises(NotYetUnlockableError):
            await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)
        key_service.derive_key.assert_not_called()

    @pytest.mark.asyncio
    async def test_unlockable_exactly_at_unlock_time(self, timelock_service, key_service, alice, clock):
        id = await _create(timelock_service, alice, unlock_time=clock.now() + 60)
        clock.current += 60

        key = await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)

        assert key == KeyResponse(key_hex="deadbeef", caller="alice")
        key_service.derive_key.assert_awaited_once_with(
            KeyContext.TIMELOCK.value,
            f"timelock_{id}".encode(),
            TRANSPORT_KEY,
        )

    @pytest.mark.asyncio
    async def test_release_is_repeatable(self, timelock_service, key_service, alice, clock):
        id = await _create(timelock_service, alice)
        clock.current += 3600

        first = await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)
        second = await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)

        assert first == second
        assert key_service.derive_key.await_count == 2
        assert await timelock_service.get_content(id, alice) == "secret"

    @pytest.mark.asyncio
    async def test_key_service_failure_propagates(self, timelock_service, key_service, alice, clock):
        key_service.derive_key.side_effect = KeyServiceError("Failed to derive key: boom")
        id = await _create(timelock_service, alice)
        clock.current += 3600

        with pytest.raises(KeyServiceError) as exc_info:
            await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)
        assert exc_info.value.detail == "Failed to derive key: boom"

    @pytest.mark.asyncio
    async def test_scenario_alice_and_bob(self, timelock_service, key_service, alice, bob, clock):
        now = clock.now()
        id = await timelock_service.create("secret", now + 3600, "My Note", alice)

        with pytest.raises(AccessDeniedError):
            await timelock_service.get_content(id, bob)

        clock.current = now + 1
        with pytest.raises(NotYetUnlockableError):
            await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)

        clock.current = now + 3601
        key = await timelock_service.request_decryption_key(id, TRANSPORT_KEY, alice)
        assert key.key_hex == "deadbeef"
        key_service.derive_key.assert_awaited_once()


class TestPublicKey:
    @pytest.mark.asyncio
    async def test_public_key_uses_timelock_context(self, timelock_service, key_service, alice):
        key = await timelock_service.public_key(alice)

        assert key == KeyResponse(key_hex="a1b2c3", caller="alice")
        key_service.public_key.assert_awaited_once_with(b"timelock_encryption")
