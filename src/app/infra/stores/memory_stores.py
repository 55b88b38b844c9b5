"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.authorization import Binding, ChatHandle, WhitelistEntry, utcnow_iso
from app.protocols.authorization_store import DEFAULT_LIST_LIMIT, AuthorizationStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class MemoryAuthorizationStore(AuthorizationStoreProtocol):
    """Whitelist e vínculos em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self._whitelist: dict[str, WhitelistEntry] = {}  # phone -> entry
        self._bindings: dict[str, Binding] = {}  # phone -> binding

    async def put_whitelist_entry(self, phone: str) -> WhitelistEntry:
        existing = self._whitelist.get(phone)
        if existing is not None:
            return existing
        entry = WhitelistEntry(phone=phone)
        self._whitelist[phone] = entry
        return entry

    async def list_whitelist_entries(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[WhitelistEntry]:
        ordered = sorted(self._whitelist.values(), key=lambda e: e.created_at, reverse=True)
        return ordered[:limit]

    async def remove_whitelist_entry(self, phone: str) -> None:
        self._whitelist.pop(phone, None)

    async def is_whitelisted(self, phone: str) -> bool:
        return phone in self._whitelist

    async def get_binding(self, phone: str) -> Binding | None:
        return self._bindings.get(phone)

    async def put_binding(self, phone: str, chat_handle: ChatHandle) -> Binding:
        binding = Binding(phone=phone, chat_handle=chat_handle, updated_at=utcnow_iso())
        self._bindings[phone] = binding
        return binding
