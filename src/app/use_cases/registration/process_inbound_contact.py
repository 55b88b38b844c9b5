"""Use case de cadastro por mensagem inbound.

Fluxo por evento (sem estado entre eventos):
    extrair texto -> normalizar -> consultar whitelist ->
    vincular e confirmar | recusar.

Texto com menos de 7 dígitos é conversa e é ignorado sem resposta.
Número autorizado tem o vínculo gravado ANTES da confirmação: confirmação
enviada implica vínculo persistido. Falhas de store e de envio viram
resultado (nunca exceção), pois o webhook sempre responde sucesso ao canal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.domain.outcomes import ErrorKind, Failure
from app.domain.phone import looks_like_phone, normalize_phone
from config.logging import mask_phone
from config.settings.telegram import DEFAULT_CONFIRMATION_TEXT, DEFAULT_REJECTION_TEXT
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from app.protocols import (
        AuthorizationStoreProtocol,
        InboundNormalizerProtocol,
        MessageDispatcherProtocol,
    )
    from app.protocols.models import InboundTextMessage
    from app.use_cases.registration.chat_commands import ChatCommandHandler

logger = logging.getLogger(__name__)


class InboundOutcome(StrEnum):
    """Desfecho de um evento inbound."""

    IGNORED_NO_TEXT = "ignored_no_text"
    IGNORED_NOT_PHONE = "ignored_not_phone"
    BOUND = "bound"
    REJECTED = "rejected"
    COMMAND = "command"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class InboundProcessingResult:
    """Resultado do processamento inbound.

    Attributes:
        outcome: Desfecho do evento
        phone: Chave canônica extraída (vazia se não chegou a normalizar)
        notified: True se a resposta ao chat foi aceita pelo transporte
        failure: Falha absorvida (store ou envio), se houve
    """

    outcome: InboundOutcome
    phone: str = ""
    notified: bool = False
    failure: Failure | None = None


class ProcessInboundContactUseCase:
    """Processa uma mensagem inbound e decide vínculo ou recusa."""

    def __init__(
        self,
        *,
        normalizer: InboundNormalizerProtocol,
        store: AuthorizationStoreProtocol,
        dispatcher: MessageDispatcherProtocol,
        confirmation_text: str = DEFAULT_CONFIRMATION_TEXT,
        rejection_text: str = DEFAULT_REJECTION_TEXT,
        command_handler: ChatCommandHandler | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._store = store
        self._dispatcher = dispatcher
        self._confirmation_text = confirmation_text
        self._rejection_text = rejection_text
        self._command_handler = command_handler

    async def execute(self, payload: dict[str, Any]) -> InboundProcessingResult:
        """Executa o fluxo completo para um payload bruto do canal."""
        message = self._normalizer.extract(payload)
        if message is None:
            return InboundProcessingResult(outcome=InboundOutcome.IGNORED_NO_TEXT)

        if self._command_handler is not None:
            handled = await self._command_handler.handle(message)
            if handled is not None:
                return handled

        phone = normalize_phone(message.text)
        if not looks_like_phone(phone):
            return InboundProcessingResult(outcome=InboundOutcome.IGNORED_NOT_PHONE)

        try:
            authorized = await self._store.is_whitelisted(phone)
        except StoreUnavailableError:
            return _store_failure(phone, "whitelist_lookup")

        if authorized:
            return await self._bind_and_confirm(phone, message)
        return await self._reject(phone, message)

    async def _bind_and_confirm(
        self,
        phone: str,
        message: InboundTextMessage,
    ) -> InboundProcessingResult:
        try:
            await self._store.put_binding(phone, message.chat_handle)
        except StoreUnavailableError:
            # Sem vínculo persistido não há confirmação
            return _store_failure(phone, "binding_write")

        dispatch = await self._dispatcher.send(message.chat_handle, self._confirmation_text)
        logger.info(
            "inbound_contact_bound",
            extra={"phone": mask_phone(phone), "notified": dispatch.success},
        )
        return InboundProcessingResult(
            outcome=InboundOutcome.BOUND,
            phone=phone,
            notified=dispatch.success,
            failure=_dispatch_failure(dispatch.success, dispatch.error_detail),
        )

    async def _reject(
        self,
        phone: str,
        message: InboundTextMessage,
    ) -> InboundProcessingResult:
        dispatch = await self._dispatcher.send(message.chat_handle, self._rejection_text)
        logger.info(
            "inbound_contact_rejected",
            extra={"phone": mask_phone(phone), "notified": dispatch.success},
        )
        return InboundProcessingResult(
            outcome=InboundOutcome.REJECTED,
            phone=phone,
            notified=dispatch.success,
            failure=_dispatch_failure(dispatch.success, dispatch.error_detail),
        )


def _store_failure(phone: str, stage: str) -> InboundProcessingResult:
    logger.warning(
        "inbound_contact_store_unavailable",
        extra={"phone": mask_phone(phone), "stage": stage},
    )
    return InboundProcessingResult(
        outcome=InboundOutcome.FAILED,
        phone=phone,
        failure=Failure(ErrorKind.STORE_UNAVAILABLE, stage),
    )


def _dispatch_failure(success: bool, detail: str | None) -> Failure | None:
    if success:
        return None
    return Failure(ErrorKind.DISPATCH_FAILED, detail or "")
