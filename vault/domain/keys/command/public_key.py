from vault.domain.auth.model.identity import Identity
from vault.domain.keys.model.value import CallerKeyContext, KeyResponse
from vault.domain.keys.service.keys import KeyContextService
from vault.domain.shared.authorization.gate import public
from vault.domain.shared.command import Command, CommandHandler, Result


class FetchPublicKey(Command):
    context: CallerKeyContext


class PublicKeyFetched(Result):
    key: KeyResponse


class FetchPublicKeyHandler(CommandHandler[FetchPublicKey, PublicKeyFetched]):
    """Verification key (symmetric) or master encryption key (IBE)."""

    __auth__ = public()
    identity: Identity
    key_context_service: KeyContextService

    async def run(self, cmd: FetchPublicKey) -> PublicKeyFetched:
        key = await self.key_context_service.get_public_parameters(
            cmd.context.context, self.identity
        )
        return PublicKeyFetched(key=key)
