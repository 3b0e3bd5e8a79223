"""DI provider for the key service adapter."""

from typing import AsyncIterable

import httpx
from dishka import Provider, provide

from vault.config import Config
from vault.domain.keys.port.key_service import KeyService
from vault.infrastructure.keys.http import HttpKeyService
from vault.util.di.scope import Scope


class KeyServiceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_key_service_http_client(
        self, config: Config
    ) -> AsyncIterable[httpx.AsyncClient]:
        """Shared HTTP client for key service calls (connection pooling)."""
        async with httpx.AsyncClient(timeout=config.key_service.timeout) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_key_service(self, config: Config, http_client: httpx.AsyncClient) -> KeyService:
        return HttpKeyService(config=config.key_service, http_client=http_client)
