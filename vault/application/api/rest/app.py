import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vault.application.api.v1.errors import map_vault_error
from vault.application.api.v1.routes import health, keys, timelocks
from vault.application.di import create_container
from vault.config import Config, configure_logging
from vault.domain.shared.authorization.startup import validate_all_handlers
from vault.domain.shared.error import ConfigurationError, VaultError
from vault.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    yield
    await container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info(
        "Starting %s v%s (store=%s)",
        config.server.name,
        config.server.version,
        config.store.backend,
    )

    if not config.auth.jwt.secret:
        raise ConfigurationError("VAULT_AUTH__JWT__SECRET must be set to verify bearer tokens")

    # Every handler must declare its gate (fail fast)
    validate_all_handlers()

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Trace HTTP requests and outgoing key service calls
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    setup_dishka(container or create_container(config), app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(timelocks.router, prefix="/api/v1")
    app_instance.include_router(keys.router, prefix="/api/v1")

    @app_instance.exception_handler(VaultError)
    async def vault_error_handler(request: Request, exc: VaultError):
        http_exc = map_vault_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app_instance
