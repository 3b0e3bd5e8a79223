from vault.domain.auth.model.identity import Principal
from vault.domain.shared.authorization.gate import authenticated
from vault.domain.shared.query import Query, QueryHandler, Result
from vault.domain.timelock.model.value import TimelockSummary
from vault.domain.timelock.service.timelock import TimelockService


class ListMyTimelocks(Query): ...


class TimelockList(Result):
    items: list[TimelockSummary]


class ListMyTimelocksHandler(QueryHandler[ListMyTimelocks, TimelockList]):
    __auth__ = authenticated()
    principal: Principal
    timelock_service: TimelockService

    async def run(self, query: ListMyTimelocks) -> TimelockList:
        items = await self.timelock_service.list_mine(self.principal)
        return TimelockList(items=items)
