"""Gate de sessão e respostas de erro das rotas admin.

Toda rota protegida autentica antes de qualquer validação de entrada.
Erros seguem o corpo {"ok": false, "error": <kind>, "detail": <texto>}.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse

from app.domain.outcomes import ErrorKind, Failure
from utils.errors import ConfigMissingError, StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_PHONE: 400,
    ErrorKind.MESSAGE_REQUIRED: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.NOT_REGISTERED: 404,
    ErrorKind.DISPATCH_FAILED: 502,
    ErrorKind.STORE_UNAVAILABLE: 503,
    ErrorKind.CONFIG_MISSING: 500,
}


def _get_authenticator():
    """Obtém o autenticador de sessão (lazy-loading via bootstrap)."""
    from app.bootstrap import get_session_authenticator

    return get_session_authenticator()


def error_response(failure: Failure) -> JSONResponse:
    """Converte Failure em resposta HTTP."""
    status_code = _STATUS_BY_KIND.get(failure.kind, 500)
    if not failure.is_expected:
        logger.error(
            "admin_request_failed",
            extra={"error_kind": failure.kind.value, "status_code": status_code},
        )
    return JSONResponse(
        content={"ok": False, "error": failure.kind.value, "detail": failure.detail},
        status_code=status_code,
    )


def require_session(request: Request) -> Failure | None:
    """Valida a sessão do request.

    Returns:
        None se autenticado; Failure(Unauthenticated|ConfigMissing) caso contrário
    """
    try:
        authenticator = _get_authenticator()
    except ConfigMissingError:
        return Failure(ErrorKind.CONFIG_MISSING, "Autenticação não configurada")

    result = authenticator.authenticate_request(request.headers, request.cookies)
    if isinstance(result, Failure):
        return Failure(ErrorKind.UNAUTHENTICATED, "Não autenticado")
    return None


def resolve_dependency(factory: Callable[[], T]) -> T | Failure:
    """Resolve dependência do bootstrap; store que não sobe vira Failure(StoreUnavailable)."""
    try:
        return factory()
    except StoreUnavailableError:
        return Failure(ErrorKind.STORE_UNAVAILABLE, "Store de autorização indisponível")


async def read_json_body(request: Request) -> dict[str, Any]:
    """Lê o corpo JSON; corpo ausente ou inválido vira dict vazio."""
    raw_body = await request.body()
    if not raw_body:
        return {}
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.info("admin_request_invalid_json")
        return {}
    return payload if isinstance(payload, dict) else {}
