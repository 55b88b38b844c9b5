"""Agregador de rotas: registra todos os routers.

Este módulo é responsável por criar o router principal da API
e incluir todos os sub-routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.router import router as admin_router
from api.routes.health.router import router as health_router
from api.routes.pages.router import router as pages_router
from api.routes.telegram.webhook import router as telegram_webhook_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Páginas do painel (/, /login, /dashboard)
    api_router.include_router(pages_router, tags=["pages"])

    # APIs do painel (protegidas por sessão, exceto login/logout)
    api_router.include_router(admin_router, prefix="/api", tags=["admin"])

    # Telegram
    api_router.include_router(
        telegram_webhook_router,
        prefix="/api/telegram/webhook",
        tags=["telegram"],
    )

    return api_router
