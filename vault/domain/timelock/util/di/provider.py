from dishka import Provider, provide

from vault.domain.keys.service.keys import KeyContextService
from vault.domain.shared.port.clock import Clock
from vault.domain.timelock.command.create import CreateTimelockMessageHandler
from vault.domain.timelock.command.decryption_key import GetTimelockDecryptionKeyHandler
from vault.domain.timelock.command.encryption_key import GetTimelockEncryptionKeyHandler
from vault.domain.timelock.command.update_content import UpdateTimelockContentHandler
from vault.domain.timelock.port.repository import TimelockRepository
from vault.domain.timelock.query.get_content import GetTimelockContentHandler
from vault.domain.timelock.query.get_identity import GetTimelockIdentityHandler
from vault.domain.timelock.query.list_mine import ListMyTimelocksHandler
from vault.domain.timelock.service.timelock import TimelockService
from vault.util.di.scope import Scope


class TimelockProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_timelock_service(
        self,
        timelock_repo: TimelockRepository,
        key_context_service: KeyContextService,
        clock: Clock,
    ) -> TimelockService:
        return TimelockService(
            timelock_repo=timelock_repo,
            key_context_service=key_context_service,
            clock=clock,
        )

    # Command Handlers
    create_handler = provide(CreateTimelockMessageHandler, scope=Scope.UOW)
    update_content_handler = provide(UpdateTimelockContentHandler, scope=Scope.UOW)
    decryption_key_handler = provide(GetTimelockDecryptionKeyHandler, scope=Scope.UOW)
    encryption_key_handler = provide(GetTimelockEncryptionKeyHandler, scope=Scope.UOW)

    # Query Handlers
    get_content_handler = provide(GetTimelockContentHandler, scope=Scope.UOW)
    get_identity_handler = provide(GetTimelockIdentityHandler, scope=Scope.UOW)
    list_mine_handler = provide(ListMyTimelocksHandler, scope=Scope.UOW)
