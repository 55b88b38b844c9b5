"""Parse inicial do webhook do Telegram (sem PII)."""

from __future__ import annotations

import json


class InvalidJsonError(ValueError):
    """JSON inválido no payload do webhook."""


def parse_webhook_body(raw_body: bytes) -> dict[str, object]:
    """Parseia o corpo do update.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
