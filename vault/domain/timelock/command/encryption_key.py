from vault.domain.auth.model.identity import Identity
from vault.domain.keys.model.value import KeyResponse
from vault.domain.shared.authorization.gate import public
from vault.domain.shared.command import Command, CommandHandler, Result
from vault.domain.timelock.service.timelock import TimelockService


class GetTimelockEncryptionKey(Command): ...


class TimelockEncryptionKey(Result):
    key: KeyResponse


class GetTimelockEncryptionKeyHandler(
    CommandHandler[GetTimelockEncryptionKey, TimelockEncryptionKey]
):
    __auth__ = public()
    identity: Identity
    timelock_service: TimelockService

    async def run(self, cmd: GetTimelockEncryptionKey) -> TimelockEncryptionKey:
        key = await self.timelock_service.public_key(self.identity)
        return TimelockEncryptionKey(key=key)
