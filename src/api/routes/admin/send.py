"""Envio manual de mensagem para número vinculado (protegido por sessão)."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.admin._session import (
    error_response,
    read_json_body,
    require_session,
    resolve_dependency,
)
from app.domain.outcomes import Failure

router = APIRouter()


def _get_whitelist_admin():
    """Obtém o use case administrativo (lazy-loading via bootstrap)."""
    from app.bootstrap import get_whitelist_admin_use_case

    return get_whitelist_admin_use_case()


@router.post("/send")
async def send_message(request: Request) -> JSONResponse:
    """POST /api/send {phone, message} -> {ok}.

    400 para telefone/mensagem inválidos, 404 se o número nunca falou
    com o bot, 502 se o Telegram recusar o envio.
    """
    denied = require_session(request)
    if denied is not None:
        return error_response(denied)

    admin = resolve_dependency(_get_whitelist_admin)
    if isinstance(admin, Failure):
        return error_response(admin)

    body = await read_json_body(request)
    result = await admin.send_manual_message(
        body.get("phone"),
        body.get("message"),
    )
    if isinstance(result, Failure):
        return error_response(result)
    return JSONResponse(content={"ok": True})
