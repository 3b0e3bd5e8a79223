from vault.domain.auth.model.identity import Identity
from vault.domain.keys.model.value import KeyResponse, TransportKey
from vault.domain.shared.authorization.gate import authenticated, require_principal
from vault.domain.shared.command import Command, CommandHandler, Result
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService


class GetTimelockDecryptionKey(Command):
    id: TimelockId
    transport_public_key: TransportKey


class TimelockDecryptionKey(Result):
    key: KeyResponse


class GetTimelockDecryptionKeyHandler(
    CommandHandler[GetTimelockDecryptionKey, TimelockDecryptionKey]
):
    __auth__ = authenticated()
    identity: Identity
    timelock_service: TimelockService

    async def run(self, cmd: GetTimelockDecryptionKey) -> TimelockDecryptionKey:
        key = await self.timelock_service.request_decryption_key(
            cmd.id,
            cmd.transport_public_key,
            require_principal(self.identity),
        )
        return TimelockDecryptionKey(key=key)
