"""Modelos de fronteira compartilhados entre api/ e app/."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.authorization import ChatHandle


@dataclass(frozen=True, slots=True)
class InboundTextMessage:
    """Mensagem de texto inbound já extraída do payload do canal.

    Attributes:
        text: Texto livre enviado pelo usuário
        chat_handle: Identificador opaco do chat (destino das respostas)
        sender_id: ID do remetente no canal (comandos de admin)
        update_id: ID do evento no canal (rastreamento)
    """

    text: str
    chat_handle: ChatHandle
    sender_id: int | None = None
    update_id: int | None = None
