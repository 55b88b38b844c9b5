"""Extrator de payloads da Telegram Bot API.

Estrutura do webhook Telegram:
- update_id
- message (ou edited_message, channel_post, callback_query, etc.)

Campos usados de message:
- text, chat.id, from.id
"""

from __future__ import annotations

from typing import Any

from app.protocols.models import InboundTextMessage

# Tipos de update que carregam mensagem de texto de usuário
_MESSAGE_KEYS = ("message", "edited_message")


def extract_inbound_message(payload: dict[str, Any]) -> InboundTextMessage | None:
    """Extrai texto e chat do update; None quando não há o que processar.

    Nunca levanta: campos ausentes ou com tipo inesperado resultam em None.
    """
    message = _first_message(payload)
    if message is None:
        return None

    text = message.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    chat = message.get("chat")
    chat_id = chat.get("id") if isinstance(chat, dict) else None
    if not isinstance(chat_id, (int, str)) or isinstance(chat_id, bool) or chat_id == "":
        return None

    sender = message.get("from")
    sender_id = sender.get("id") if isinstance(sender, dict) else None
    update_id = payload.get("update_id")

    return InboundTextMessage(
        text=text,
        chat_handle=chat_id,
        sender_id=sender_id if isinstance(sender_id, int) else None,
        update_id=update_id if isinstance(update_id, int) else None,
    )


def _first_message(payload: dict[str, Any]) -> dict[str, Any] | None:
    for key in _MESSAGE_KEYS:
        candidate = payload.get(key)
        if isinstance(candidate, dict):
            return candidate
    return None
