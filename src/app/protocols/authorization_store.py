"""Protocolo do store de autorização (whitelist + vínculos).

Interfaces leves (ABCs) dependidas pela camada de aplicação.
Toda chave recebida aqui já deve estar normalizada (apenas dígitos).

Falhas de acesso ao backend levantam StoreUnavailableError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.authorization import Binding, ChatHandle, WhitelistEntry

# Teto de itens retornados na listagem da whitelist
DEFAULT_LIST_LIMIT = 300


class AuthorizationStoreProtocol(ABC):
    """Contrato para whitelist de números e vínculos número -> chat."""

    @abstractmethod
    async def put_whitelist_entry(self, phone: str) -> WhitelistEntry:
        """Adiciona número à whitelist (idempotente).

        Reinserções preservam o createdAt original.

        Returns:
            Entrada persistida (nova ou existente).
        """

    @abstractmethod
    async def list_whitelist_entries(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[WhitelistEntry]:
        """Lista até `limit` entradas, mais recentes primeiro (createdAt desc)."""

    @abstractmethod
    async def remove_whitelist_entry(self, phone: str) -> None:
        """Remove número da whitelist. Remover ausente não é erro."""

    @abstractmethod
    async def is_whitelisted(self, phone: str) -> bool:
        """Retorna True se o número está na whitelist."""

    @abstractmethod
    async def get_binding(self, phone: str) -> Binding | None:
        """Busca vínculo do número, ou None se nunca falou com o bot."""

    @abstractmethod
    async def put_binding(self, phone: str, chat_handle: ChatHandle) -> Binding:
        """Cria ou atualiza vínculo (merge, preserva campos não informados)."""
