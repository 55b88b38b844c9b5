"""Cliente HTTP para a Telegram Bot API.

- sendMessage com {chat_id, text}
- Timeout de transporte vindo das settings; sem retry
- Logging estruturado sem token do bot e sem conteúdo da mensagem
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.telegram.bot_errors import parse_bot_api_error
from utils.errors import DispatchFailedError

if TYPE_CHECKING:
    from app.domain.authorization import ChatHandle
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)


class HttpError(DispatchFailedError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TelegramHttpClient:
    """Cliente da Bot API.

    Args:
        api_endpoint: URL base com token (https://api.telegram.org/bot<token>)
        timeout_seconds: Timeout por requisição
        transport: Transport httpx opcional (testes com httpx.MockTransport)
    """

    def __init__(
        self,
        api_endpoint: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_endpoint = api_endpoint.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def send_message(self, chat_id: ChatHandle, text: str) -> dict[str, Any]:
        """Envia texto para um chat.

        Returns:
            Campo `result` do response da Bot API

        Raises:
            HttpError: Falha de conexão, timeout ou erro da Bot API
                (mensagem carrega a description bruta do Telegram)
        """
        url = f"{self._api_endpoint}/sendMessage"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json={"chat_id": chat_id, "text": text})
        except httpx.TimeoutException as exc:
            raise HttpError("telegram_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError(f"telegram_connection_error: {type(exc).__name__}") from exc

        try:
            data: Any = response.json()
        except ValueError:
            data = None

        api_error = parse_bot_api_error(data, response.status_code)
        if api_error is not None or not response.is_success:
            code = api_error.error_code if api_error else response.status_code
            description = api_error.description if api_error else response.text
            logger.warning(
                "telegram_send_message_failed",
                extra={"status_code": response.status_code, "error_code": code},
            )
            raise HttpError(
                f"Telegram sendMessage failed: {description}",
                status_code=code,
            )

        logger.debug("telegram_send_message_ok", extra={"status_code": response.status_code})
        return data.get("result") or {}


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory do cliente Telegram com config do ambiente.

    Raises:
        ValueError: Se o token do bot não estiver configurado.
    """
    from config.settings import get_telegram_settings

    telegram = settings or get_telegram_settings()
    return TelegramHttpClient(
        api_endpoint=telegram.api_endpoint,
        timeout_seconds=telegram.request_timeout_seconds,
    )
