"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API ({"ok": false, ...})."""

    error_code: int
    description: str


def parse_bot_api_error(response_data: Any, status_code: int) -> TelegramApiError | None:
    """Extrai erro do response da Bot API.

    Args:
        response_data: JSON decodificado (ou None se não for JSON)
        status_code: Status HTTP recebido

    Returns:
        TelegramApiError se houver erro, None se sucesso
    """
    if isinstance(response_data, dict) and response_data.get("ok") is True:
        return None

    if isinstance(response_data, dict):
        return TelegramApiError(
            error_code=int(response_data.get("error_code") or status_code),
            description=str(response_data.get("description") or "Erro desconhecido"),
        )
    return TelegramApiError(error_code=status_code, description="Resposta inválida da Bot API")
