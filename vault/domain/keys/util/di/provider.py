from dishka import Provider, provide

from vault.domain.keys.command.derive_key import DeriveCallerKeyHandler
from vault.domain.keys.command.public_key import FetchPublicKeyHandler
from vault.domain.keys.port.key_service import KeyService
from vault.domain.keys.service.keys import KeyContextService
from vault.util.di.scope import Scope


class KeysProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_key_context_service(self, key_service: KeyService) -> KeyContextService:
        return KeyContextService(key_service=key_service)

    # Command Handlers
    fetch_public_key_handler = provide(FetchPublicKeyHandler, scope=Scope.UOW)
    derive_caller_key_handler = provide(DeriveCallerKeyHandler, scope=Scope.UOW)
