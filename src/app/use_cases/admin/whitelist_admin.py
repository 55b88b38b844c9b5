"""Use case administrativo: whitelist e envio manual.

Todas as operações recebem entrada crua do painel, normalizam o telefone
e devolvem resultado discriminado (Success | Failure). Falhas de store e
de envio são sempre reportadas ao chamador, pois no painel há um humano
esperando o resultado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.outcomes import ErrorKind, Failure, Success
from app.domain.phone import normalize_phone
from app.protocols.authorization_store import DEFAULT_LIST_LIMIT
from config.logging import mask_phone
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.authorization import WhitelistEntry
    from app.protocols.authorization_store import AuthorizationStoreProtocol
    from app.protocols.message_dispatcher import MessageDispatcherProtocol

logger = logging.getLogger(__name__)

_STORE_FAILURE_DETAIL = "Store de autorização indisponível"


class WhitelistAdminUseCase:
    """Operações do painel sobre whitelist e vínculos.

    Args:
        store: Store de autorização
        dispatcher: Envio outbound para o chat vinculado
        list_limit: Teto da listagem (default 300)
    """

    def __init__(
        self,
        store: AuthorizationStoreProtocol,
        dispatcher: MessageDispatcherProtocol,
        list_limit: int = DEFAULT_LIST_LIMIT,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._list_limit = list_limit

    async def add_number(self, raw_phone: object) -> Success[WhitelistEntry] | Failure:
        """Adiciona número à whitelist (idempotente, preserva createdAt)."""
        phone = normalize_phone(raw_phone)
        if not phone:
            return Failure(ErrorKind.INVALID_PHONE, "Telefone inválido")
        try:
            entry = await self._store.put_whitelist_entry(phone)
        except StoreUnavailableError:
            return Failure(ErrorKind.STORE_UNAVAILABLE, _STORE_FAILURE_DETAIL)
        logger.info("whitelist_entry_added", extra={"phone": mask_phone(phone)})
        return Success(entry)

    async def list_numbers(
        self,
        limit: int | None = None,
    ) -> Success[Sequence[WhitelistEntry]] | Failure:
        """Lista números, mais recentes primeiro, até o teto configurado."""
        effective = min(limit, self._list_limit) if limit else self._list_limit
        try:
            entries = await self._store.list_whitelist_entries(effective)
        except StoreUnavailableError:
            return Failure(ErrorKind.STORE_UNAVAILABLE, _STORE_FAILURE_DETAIL)
        return Success(entries)

    async def remove_number(self, raw_phone: object) -> Success[str] | Failure:
        """Remove número da whitelist. Remover ausente não é erro.

        Vínculos existentes não são apagados.
        """
        phone = normalize_phone(raw_phone)
        if not phone:
            return Failure(ErrorKind.INVALID_PHONE, "Telefone inválido")
        try:
            await self._store.remove_whitelist_entry(phone)
        except StoreUnavailableError:
            return Failure(ErrorKind.STORE_UNAVAILABLE, _STORE_FAILURE_DETAIL)
        logger.info("whitelist_entry_removed", extra={"phone": mask_phone(phone)})
        return Success(phone)

    async def send_manual_message(
        self,
        raw_phone: object,
        raw_message: object,
    ) -> Success[str] | Failure:
        """Envia mensagem manual ao chat vinculado ao número.

        Returns:
            Success(phone) ou Failure com InvalidPhone, MessageRequired,
            NotRegistered, StoreUnavailable ou DispatchFailed.
        """
        phone = normalize_phone(raw_phone)
        if not phone:
            return Failure(ErrorKind.INVALID_PHONE, "Telefone inválido")

        message = str(raw_message).strip() if raw_message is not None else ""
        if not message:
            return Failure(ErrorKind.MESSAGE_REQUIRED, "Mensagem obrigatória")

        try:
            binding = await self._store.get_binding(phone)
        except StoreUnavailableError:
            return Failure(ErrorKind.STORE_UNAVAILABLE, _STORE_FAILURE_DETAIL)

        if binding is None or binding.chat_handle is None:
            return Failure(
                ErrorKind.NOT_REGISTERED,
                "O número ainda não falou com o bot (sem chat vinculado). "
                "O titular precisa abrir o bot e enviar o número uma vez.",
            )

        result = await self._dispatcher.send(binding.chat_handle, message)
        if not result.success:
            logger.warning("manual_send_failed", extra={"phone": mask_phone(phone)})
            return Failure(ErrorKind.DISPATCH_FAILED, result.error_detail or "Falha no envio")

        logger.info("manual_send_ok", extra={"phone": mask_phone(phone)})
        return Success(phone)
