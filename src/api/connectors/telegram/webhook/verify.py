"""Verificação do secret compartilhado do webhook do Telegram.

O secret pode chegar pela query (?secret=...) ou pelo header que o
Telegram envia quando o webhook é registrado com secret_token.
"""

from __future__ import annotations

from app.infra.crypto import secrets_match

SECRET_TOKEN_HEADER = "x-telegram-bot-api-secret-token"


def is_webhook_authorized(
    query_secret: str | None,
    header_secret: str | None,
    expected_secret: str | None,
) -> bool:
    """Retorna True se o webhook está liberado para processamento.

    Sem secret configurado, todo update é aceito.
    """
    if not expected_secret:
        return True
    return secrets_match(query_secret, expected_secret) or secrets_match(
        header_secret, expected_secret
    )
