from vault.domain.auth.model.identity import Identity
from vault.domain.keys.model.value import CallerKeyContext, KeyResponse, TransportKey
from vault.domain.keys.service.keys import KeyContextService
from vault.domain.shared.authorization.gate import authenticated, require_principal
from vault.domain.shared.command import Command, CommandHandler, Result


class DeriveCallerKey(Command):
    context: CallerKeyContext
    transport_public_key: TransportKey


class CallerKeyDerived(Result):
    key: KeyResponse


class DeriveCallerKeyHandler(CommandHandler[DeriveCallerKey, CallerKeyDerived]):
    """Encrypted symmetric key or IBE decryption key for the calling principal."""

    __auth__ = authenticated()
    identity: Identity
    key_context_service: KeyContextService

    async def run(self, cmd: DeriveCallerKey) -> CallerKeyDerived:
        key = await self.key_context_service.derive_key_for_caller(
            cmd.context.context,
            require_principal(self.identity),
            cmd.transport_public_key,
        )
        return CallerKeyDerived(key=key)
