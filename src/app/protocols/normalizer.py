"""Protocolo de extração de mensagens inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.protocols.models import InboundTextMessage


class InboundNormalizerProtocol(Protocol):
    """Extrai a mensagem de texto de um payload bruto do canal.

    Função total: retorna None para eventos sem texto ou sem chat.
    """

    def extract(self, payload: dict[str, Any]) -> InboundTextMessage | None: ...
