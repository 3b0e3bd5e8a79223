from vault.domain.auth.model.identity import Identity
from vault.domain.shared.authorization.gate import authenticated, require_principal
from vault.domain.shared.command import Command, CommandHandler, Result
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService


class UpdateTimelockContent(Command):
    id: TimelockId
    content: str


class TimelockContentUpdated(Result):
    updated: bool


class UpdateTimelockContentHandler(CommandHandler[UpdateTimelockContent, TimelockContentUpdated]):
    """Replace the stored payload, typically with IBE ciphertext."""

    __auth__ = authenticated()
    identity: Identity
    timelock_service: TimelockService

    async def run(self, cmd: UpdateTimelockContent) -> TimelockContentUpdated:
        updated = await self.timelock_service.update_content(
            cmd.id, cmd.content, require_principal(self.identity)
        )
        return TimelockContentUpdated(updated=updated)
