"""Entrypoint ASGI do Registra_Bot.

Uso:
    uvicorn app.app:app --host 0.0.0.0 --port 8080
    registra-bot            # script do pyproject, usa HOST/PORT
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.middleware import CorrelationIdMiddleware
from api.routes import create_api_router
from app.bootstrap import get_authorization_store, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging configurado antes de qualquer request
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: valida settings (ConfigMissingError aborta o boot) e aquece o store."""
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    backend = get_firestore_settings().backend
    try:
        get_authorization_store()
    except Exception as exc:
        # /ready reporta o store; o boot segue para expor o diagnóstico
        logger.warning(
            "authorization_store_not_ready",
            extra={"backend": backend, "error_type": type(exc).__name__},
        )
    else:
        logger.info("authorization_store_ready", extra={"backend": backend})

    yield

    logger.info("app_shutting_down", extra={"service": service})


def create_app() -> FastAPI:
    settings = get_base_settings()
    docs_enabled = not settings.is_production

    fastapi_app = FastAPI(
        title="Registra_Bot",
        description="Cadastro de números via bot Telegram com painel admin",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"service": settings.service_name, "environment": settings.environment},
    )
    return fastapi_app


app = create_app()


def main() -> None:
    """Sobe o uvicorn com HOST/PORT das settings (reload fora de produção)."""
    import uvicorn

    settings = get_base_settings()
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
