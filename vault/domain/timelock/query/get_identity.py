from vault.domain.auth.model.identity import Principal
from vault.domain.shared.authorization.gate import authenticated
from vault.domain.shared.query import Query, QueryHandler, Result
from vault.domain.timelock.model.value import TimelockId
from vault.domain.timelock.service.timelock import TimelockService


class GetTimelockIdentity(Query):
    id: TimelockId


class TimelockIdentity(Result):
    identity: str


class GetTimelockIdentityHandler(QueryHandler[GetTimelockIdentity, TimelockIdentity]):
    """Release identity the creator encrypts against before unlock."""

    __auth__ = authenticated()
    principal: Principal
    timelock_service: TimelockService

    async def run(self, query: GetTimelockIdentity) -> TimelockIdentity:
        identity = await self.timelock_service.get_release_identity(query.id, self.principal)
        return TimelockIdentity(identity=identity)
