"""Fakes de dispatcher e store para testes deterministas."""

from __future__ import annotations

from app.domain.authorization import ChatHandle
from app.infra.stores import MemoryAuthorizationStore
from app.protocols.message_dispatcher import DispatchResult
from utils.errors import StoreUnavailableError


class FakeDispatcher:
    """Registra envios em memória; pode simular recusa do transporte."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.sent: list[tuple[ChatHandle, str]] = []
        self._fail_with = fail_with

    async def send(self, chat_handle: ChatHandle, text: str) -> DispatchResult:
        self.sent.append((chat_handle, text))
        if self._fail_with is not None:
            return DispatchResult(success=False, error_detail=self._fail_with)
        return DispatchResult(success=True)


class FailingAuthorizationStore(MemoryAuthorizationStore):
    """Store em memória com operações selecionadas indisponíveis.

    Exemplo:
        FailingAuthorizationStore(failing={"put_binding"})
    """

    def __init__(self, failing: set[str]) -> None:
        super().__init__()
        self._failing = failing

    def _check(self, operation: str) -> None:
        if operation in self._failing:
            raise StoreUnavailableError(f"{operation} indisponível")

    async def put_whitelist_entry(self, phone: str):
        self._check("put_whitelist_entry")
        return await super().put_whitelist_entry(phone)

    async def list_whitelist_entries(self, limit: int = 300):
        self._check("list_whitelist_entries")
        return await super().list_whitelist_entries(limit)

    async def remove_whitelist_entry(self, phone: str) -> None:
        self._check("remove_whitelist_entry")
        await super().remove_whitelist_entry(phone)

    async def is_whitelisted(self, phone: str) -> bool:
        self._check("is_whitelisted")
        return await super().is_whitelisted(phone)

    async def get_binding(self, phone: str):
        self._check("get_binding")
        return await super().get_binding(phone)

    async def put_binding(self, phone: str, chat_handle: ChatHandle):
        self._check("put_binding")
        return await super().put_binding(phone, chat_handle)
