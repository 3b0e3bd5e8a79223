from vault.domain.auth.model.identity import Identity
from vault.domain.shared.authorization.gate import authenticated, require_principal
from vault.domain.shared.command import Command, CommandHandler, Result
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService


class CreateTimelockMessage(Command):
    content: str
    unlock_time: int
    title: str


class TimelockCreated(Result):
    id: TimelockId


class CreateTimelockMessageHandler(CommandHandler[CreateTimelockMessage, TimelockCreated]):
    __auth__ = authenticated()
    identity: Identity
    timelock_service: TimelockService

    async def run(self, cmd: CreateTimelockMessage) -> TimelockCreated:
        id = await self.timelock_service.create(
            content=cmd.content,
            unlock_time=cmd.unlock_time,
            title=cmd.title,
            caller=require_principal(self.identity),
        )
        return TimelockCreated(id=id)
