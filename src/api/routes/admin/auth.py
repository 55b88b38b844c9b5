"""Endpoints de login/logout do admin.

- POST /api/auth/login: {username, password} -> {ok, token} + cookie de sessão
- POST /api/auth/logout: limpa o cookie (sempre ok)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.admin._session import error_response, read_json_body
from app.domain.outcomes import ErrorKind, Failure
from config.settings import get_auth_settings
from utils.errors import ConfigMissingError

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_login_use_case():
    """Obtém o use case de login (lazy-loading via bootstrap)."""
    from app.bootstrap import get_admin_login_use_case

    return get_admin_login_use_case()


@router.post("/auth/login")
async def login(request: Request) -> JSONResponse:
    """Confere credenciais e emite sessão (corpo + cookie httpOnly)."""
    try:
        use_case = _get_login_use_case()
    except ConfigMissingError:
        logger.error("admin_login_not_configured")
        return error_response(Failure(ErrorKind.CONFIG_MISSING, "Admin não configurado"))

    body = await read_json_body(request)
    result = use_case.login(body.get("username"), body.get("password"))
    if isinstance(result, Failure):
        return error_response(result)

    settings = get_auth_settings()
    response = JSONResponse(content={"ok": True, "token": result.value})
    response.set_cookie(
        key=settings.cookie_name,
        value=result.value,
        max_age=settings.session_max_age_seconds,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/auth/logout")
async def logout() -> JSONResponse:
    """Limpa o cookie de sessão. Não há revogação do lado do servidor."""
    settings = get_auth_settings()
    response = JSONResponse(content={"ok": True})
    response.delete_cookie(
        key=settings.cookie_name,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite="lax",
    )
    return response
