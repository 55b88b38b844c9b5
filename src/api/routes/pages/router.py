"""Páginas estáticas do painel (login e dashboard).

Arquivos servidos de PUBLIC_DIR (default "public", relativo ao diretório
de execução). O dashboard exige sessão quando DASHBOARD_REQUIRES_SESSION
está ligado; as APIs são protegidas de qualquer forma.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse, RedirectResponse, Response

from api.routes.admin._session import require_session
from config.settings import get_auth_settings, get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()

LOGIN_PAGE = "login.html"
DASHBOARD_PAGE = "dashboard.html"


def _page_response(filename: str) -> Response:
    path = Path(get_base_settings().public_dir) / filename
    if not path.is_file():
        logger.error("static_page_missing", extra={"page": filename})
        return PlainTextResponse("Not Found", status_code=404)
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse(url="/login", status_code=302)


@router.get("/login", include_in_schema=False)
async def login_page() -> Response:
    return _page_response(LOGIN_PAGE)


@router.get("/dashboard", include_in_schema=False)
async def dashboard_page(request: Request) -> Response:
    if get_auth_settings().dashboard_requires_session and require_session(request) is not None:
        return RedirectResponse(url="/login", status_code=302)
    return _page_response(DASHBOARD_PAGE)
