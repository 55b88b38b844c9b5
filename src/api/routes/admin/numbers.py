"""Endpoints da whitelist (protegidos por sessão).

- GET /api/numbers: {items: [{phone, createdAt}, ...]} mais recentes primeiro
- POST /api/numbers: {phone} -> {ok, phone}
- DELETE /api/numbers/{phone}: {ok}
"""

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


@router.get("/numbers")
async def list_numbers(request: Request) -> JSONResponse:
    denied = require_session(request)
    if denied is not None:
        return error_response(denied)

    admin = resolve_dependency(_get_whitelist_admin)
    if isinstance(admin, Failure):
        return error_response(admin)

    result = await admin.list_numbers()
    if isinstance(result, Failure):
        return error_response(result)
    items = [entry.to_firestore_dict() for entry in result.value]
    return JSONResponse(content={"items": items})


@router.post("/numbers")
async def add_number(request: Request) -> JSONResponse:
    denied = require_session(request)
    if denied is not None:
        return error_response(denied)

    admin = resolve_dependency(_get_whitelist_admin)
    if isinstance(admin, Failure):
        return error_response(admin)

    body = await read_json_body(request)
    result = await admin.add_number(body.get("phone"))
    if isinstance(result, Failure):
        return error_response(result)
    return JSONResponse(content={"ok": True, "phone": result.value.phone})


@router.delete("/numbers/{phone}")
async def remove_number(phone: str, request: Request) -> JSONResponse:
    """Remove número; vínculo existente é mantido."""
    denied = require_session(request)
    if denied is not None:
        return error_response(denied)

    admin = resolve_dependency(_get_whitelist_admin)
    if isinstance(admin, Failure):
        return error_response(admin)

    result = await admin.remove_number(phone)
    if isinstance(result, Failure):
        return error_response(result)
    return JSONResponse(content={"ok": True})
