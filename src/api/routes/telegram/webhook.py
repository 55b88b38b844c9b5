"""Endpoints de webhook do Telegram.

Endpoints:
- GET /api/telegram/webhook: sonda simples (responde "OK")
- POST /api/telegram/webhook: recebimento de updates

Política:
- Toda requisição POST recebe 200 {"ok": true}, inclusive em falha
  (JSON inválido, secret divergente, store ou envio indisponíveis).
  O Telegram reentrega updates respondidos com erro.
- Falhas ficam apenas em log estruturado.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response

from api.connectors.telegram.webhook import (
    SECRET_TOKEN_HEADER,
    InvalidJsonError,
    is_webhook_authorized,
    parse_webhook_body,
)
from app.coordinators.telegram.inbound.handler import process_inbound_payload
from config.logging import log_absorbed_failure
from config.settings import get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()

_COMPONENT = "telegram_webhook"
_ACK: dict[str, Any] = {"ok": True}


def _get_inbound_use_case():
    """Obtém o use case de cadastro (lazy-loading via bootstrap)."""
    from app.bootstrap import get_inbound_use_case

    return get_inbound_use_case()


@router.get("")
async def probe_webhook() -> Response:
    """Responde "OK" para métodos de sondagem."""
    return Response(content="OK", media_type="text/plain")


@router.post("")
async def receive_webhook(request: Request) -> dict[str, Any]:
    """Recebimento de updates do Telegram.

    Processa o update de forma síncrona (aguarda o fluxo de cadastro)
    e sempre confirma o recebimento.
    """
    try:
        expected_secret = get_telegram_settings().webhook_secret
        if not is_webhook_authorized(
            query_secret=request.query_params.get("secret"),
            header_secret=request.headers.get(SECRET_TOKEN_HEADER),
            expected_secret=expected_secret,
        ):
            log_absorbed_failure(logger, _COMPONENT, "webhook_secret_mismatch")
            return _ACK

        raw_body = await request.body()
        try:
            payload = parse_webhook_body(raw_body)
        except InvalidJsonError:
            log_absorbed_failure(logger, _COMPONENT, "invalid_json")
            return _ACK

        logger.info("webhook_received", extra={"channel": "telegram"})
        await process_inbound_payload(payload, _get_inbound_use_case())
    except Exception as exc:
        log_absorbed_failure(logger, _COMPONENT, "unexpected_error", type(exc).__name__)

    return _ACK
