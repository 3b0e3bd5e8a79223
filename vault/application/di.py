from dishka import AsyncContainer, Provider, from_context, make_async_container

from vault.config import Config, StoreBackend
from vault.domain.auth.util.di import AuthProvider
from vault.domain.keys.util.di import KeysProvider
from vault.domain.timelock.util.di import TimelockProvider
from vault.infrastructure.keys.di import KeyServiceProvider
from vault.infrastructure.persistence.di import (
    ClockProvider,
    MemoryPersistenceProvider,
    SqlPersistenceProvider,
)
from vault.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None, *overrides: Provider) -> AsyncContainer:
    """Build the application container.

    ``overrides`` are registered last, so anything they provide replaces the
    default binding (tests swap the key service and clock this way).
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    persistence = (
        SqlPersistenceProvider()
        if config.store.backend == StoreBackend.SQL
        else MemoryPersistenceProvider()
    )

    return make_async_container(
        ConfigProvider(),
        ClockProvider(),
        persistence,
        KeyServiceProvider(),
        AuthProvider(),
        KeysProvider(),
        TimelockProvider(),
        *overrides,
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
