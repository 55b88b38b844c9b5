"""Rotas HTTP: adapters de entrada.

Estrutura:
- routes/telegram/: webhook do bot
- routes/admin/: APIs do painel (login, whitelist, envio manual)
- routes/pages/: páginas estáticas do painel
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
