"""DI provider for caller identity resolution."""

import logging

from dishka import Provider, from_context, provide
from starlette.requests import Request

from vault.config import Config
from vault.domain.auth.model.identity import Identity, Principal
from vault.domain.auth.service.token import TokenService
from vault.domain.shared.error import AuthorizationError
from vault.util.di.scope import Scope

logger = logging.getLogger(__name__)


class AuthProvider(Provider):
    request = from_context(provides=Request, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.UOW)
    def get_identity(self, request: Request, token_service: TokenService) -> Identity:
        """Anonymous for unauthenticated requests, Principal otherwise."""
        identity = token_service.resolve_identity(request.headers.get("Authorization"))
        logger.debug("Identity resolved: %s", identity.text)
        return identity

    @provide(scope=Scope.UOW)
    def get_principal(self, identity: Identity) -> Principal:
        """Extract Principal from Identity. Raises if not authenticated."""
        if isinstance(identity, Principal):
            return identity
        raise AuthorizationError("Authentication required", code="missing_token")
