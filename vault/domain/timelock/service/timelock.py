import logging

from vault.domain.auth.model.identity import Identity, Principal
from vault.domain.keys.model.value import KeyContext, KeyResponse
from vault.domain.keys.service.keys import KeyContextService
from vault.domain.shared.error import (
    EmptyContentError,
    EmptyTitleError,
    InvalidUnlockTimeError,
    NotFoundError,
)
from vault.domain.shared.port.clock import Clock
from vault.domain.shared.service import Service
from vault.domain.timelock.model.aggregate import TimelockRecord
from vault.domain.timelock.model.value import TimelockId, TimelockSummary
from vault.domain.timelock.port.repository import TimelockRepository

logger = logging.getLogger(__name__)


class TimelockService(Service):
    """Create → replace ciphertext → wait → release.

    Lock state is never stored: each call compares the clock with the
    record's ``unlock_time``.
    """

    timelock_repo: TimelockRepository
    key_context_service: KeyContextService
    clock: Clock

    async def create(
        self,
        content: str,
        unlock_time: int,
        title: str,
        caller: Principal,
    ) -> TimelockId:
        now = self.clock.now()

        if unlock_time <= now:
            raise InvalidUnlockTimeError()
        if not content.strip():
            raise EmptyContentError()
        if not title.strip():
            raise EmptyTitleError()

        id = TimelockId.generate(caller.identity, now)
        record = TimelockRecord.create(
            id=id,
            creator=caller,
            title=title,
            content=content,
            unlock_time=unlock_time,
        )
        await self.timelock_repo.insert(record)
        await self.timelock_repo.append_to_index(caller.identity, id)

        logger.info("Timelock created: id=%s, unlock_time=%d", id, unlock_time)
        return id

    async def _get_owned(self, id: TimelockId, caller: Principal) -> TimelockRecord:
        record = await self.timelock_repo.get(id)
        if record is None:
            raise NotFoundError(f"Timelock message not found: {id}")
        record.require_creator(caller)
        return record

    async def update_content(self, id: TimelockId, content: str, caller: Principal) -> bool:
        record = await self._get_owned(id, caller)
        record.replace_content(content)
        await self.timelock_repo.update(record)
        return True

    async def get_content(self, id: TimelockId, caller: Principal) -> str:
        record = await self._get_owned(id, caller)
        return record.content

    async def get_release_identity(self, id: TimelockId, caller: Principal) -> str:
        record = await self._get_owned(id, caller)
        return record.release_identity

    async def list_mine(self, caller: Principal) -> list[TimelockSummary]:
        now = self.clock.now()
        summaries: list[TimelockSummary] = []
        for id in await self.timelock_repo.list_for_owner(caller.identity):
            record = await self.timelock_repo.get(id)
            if record is not None:
                summaries.append(record.summarize(now))
        return summaries

    async def request_decryption_key(
        self,
        id: TimelockId,
        transport_public_key: bytes,
        caller: Principal,
    ) -> KeyResponse:
        record = await self._get_owned(id, caller)
        record.require_unlockable(self.clock.now())

        # Captured before suspending; later content updates don't affect this release.
        release_identity = record.release_identity.encode("utf-8")
        return await self.key_context_service.derive_key(
            KeyContext.TIMELOCK,
            release_identity,
            transport_public_key,
            caller,
        )

    async def public_key(self, caller: Identity) -> KeyResponse:
        """Master public key callers encrypt timelock content against."""
        return await self.key_context_service.get_public_parameters(KeyContext.TIMELOCK, caller)
