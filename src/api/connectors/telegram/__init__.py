"""Conector Telegram Bot API."""

from api.connectors.telegram.http_client import (
    HttpError,
    TelegramHttpClient,
    create_telegram_http_client,
)

__all__ = [
    "HttpError",
    "TelegramHttpClient",
    "create_telegram_http_client",
]
