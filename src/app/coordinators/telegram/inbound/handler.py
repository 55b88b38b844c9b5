"""Processamento inbound Telegram: executa o cadastro e absorve falhas.

O webhook sempre responde sucesso ao Telegram; qualquer falha daqui para
baixo é registrada em log e não volta ao transporte.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.logging import log_absorbed_failure

if TYPE_CHECKING:
    from app.use_cases.registration import (
        InboundProcessingResult,
        ProcessInboundContactUseCase,
    )

logger = logging.getLogger(__name__)

_COMPONENT = "telegram_webhook"


async def process_inbound_payload(
    payload: dict[str, Any],
    use_case: ProcessInboundContactUseCase,
) -> InboundProcessingResult | None:
    """Processa um update do Telegram.

    Sem logs com PII (telefones mascarados no use case).

    Args:
        payload: Update já decodificado do webhook
        use_case: Use case de cadastro injetado

    Returns:
        InboundProcessingResult, ou None se o processamento levantou exceção
    """
    try:
        result = await use_case.execute(payload)
    except Exception as exc:
        log_absorbed_failure(logger, _COMPONENT, "unexpected_error", type(exc).__name__)
        return None

    if result.failure is not None:
        log_absorbed_failure(logger, _COMPONENT, result.failure.kind.value)

    logger.info(
        "inbound_processed",
        extra={
            "outcome": result.outcome.value,
            "notified": result.notified,
        },
    )
    return result
