"""Adapters concretos para Telegram (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from api.connectors.telegram import TelegramHttpClient
from api.normalizers.telegram import extract_inbound_message
from app.protocols.message_dispatcher import DispatchResult, MessageDispatcherProtocol
from app.protocols.normalizer import InboundNormalizerProtocol
from utils.errors import DispatchFailedError

if TYPE_CHECKING:
    from app.domain.authorization import ChatHandle
    from app.protocols.models import InboundTextMessage

logger = logging.getLogger(__name__)


class TelegramUpdateNormalizer(InboundNormalizerProtocol):
    """Extrator baseado no formato de update da Bot API."""

    def extract(self, payload: dict[str, Any]) -> InboundTextMessage | None:
        return extract_inbound_message(payload)


class TelegramMessageDispatcher(MessageDispatcherProtocol):
    """Dispatcher usando cliente HTTP Telegram.

    O cliente é obtido sob demanda: token ausente vira falha de envio,
    não erro de import/boot.
    """

    def __init__(self, client_factory: Callable[[], TelegramHttpClient]) -> None:
        self._client_factory = client_factory

    async def send(self, chat_handle: ChatHandle, text: str) -> DispatchResult:
        try:
            client = self._client_factory()
            await client.send_message(chat_handle, text)
        except DispatchFailedError as exc:
            logger.warning(
                "telegram_dispatch_failed",
                extra={"status_code": getattr(exc, "status_code", None)},
            )
            return DispatchResult(success=False, error_detail=str(exc))
        except ValueError as exc:
            logger.error("telegram_dispatch_not_configured")
            return DispatchResult(success=False, error_detail=str(exc))

        logger.info("telegram_message_dispatched")
        return DispatchResult(success=True)
