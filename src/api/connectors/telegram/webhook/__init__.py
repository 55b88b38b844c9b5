"""Webhook do Telegram: parse do corpo e verificação de secret."""

from api.connectors.telegram.webhook.receive import InvalidJsonError, parse_webhook_body
from api.connectors.telegram.webhook.verify import SECRET_TOKEN_HEADER, is_webhook_authorized

__all__ = [
    "SECRET_TOKEN_HEADER",
    "InvalidJsonError",
    "is_webhook_authorized",
    "parse_webhook_body",
]
