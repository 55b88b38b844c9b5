"""Protocolo de envio outbound para um chat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.authorization import ChatHandle


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado de um envio.

    Attributes:
        success: True se o transporte aceitou a mensagem
        error_detail: Detalhe bruto do transporte em caso de falha
    """

    success: bool
    error_detail: str | None = None


class MessageDispatcherProtocol(Protocol):
    """Contrato mínimo para enviar texto a um chat.

    Não levanta exceção: falhas voltam como DispatchResult(success=False).
    Sem retry: a política por chamador decide se reporta ou absorve.
    """

    async def send(self, chat_handle: ChatHandle, text: str) -> DispatchResult: ...
