from vault.domain.auth.model.identity import Principal
from vault.domain.shared.authorization.gate import authenticated
from vault.domain.shared.query import Query, QueryHandler, Result
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService


class GetTimelockContent(Query):
    id: TimelockId


class TimelockContent(Result):
    content: str


class GetTimelockContentHandler(QueryHandler[GetTimelockContent, TimelockContent]):
    __auth__ = authenticated()
    principal: Principal
    timelock_service: TimelockService

    async def run(self, query: GetTimelockContent) -> TimelockContent:
        content = await self.timelock_service.get_content(query.id, self.principal)
        return TimelockContent(content=content)
