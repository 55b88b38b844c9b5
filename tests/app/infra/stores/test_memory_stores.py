"""Testes do store de autorização em memória."""

from __future__ import annotations

import asyncio

import pytest

from app.infra.stores.memory_stores import MemoryAuthorizationStore


class TestMemoryWhitelist:
    """Testes da whitelist do MemoryAuthorizationStore."""

    @pytest.mark.asyncio
    async def test_put_and_check_entry(self) -> None:
        """Deve autorizar número inserido."""
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")

        assert await store.is_whitelisted("5511999998888") is True
        assert await store.is_whitelisted("5511000000000") is False

    @pytest.mark.asyncio
    async def test_put_twice_preserves_created_at(self) -> None:
        """Reinserção é idempotente e mantém createdAt original."""
        store = MemoryAuthorizationStore()
        first = await store.put_whitelist_entry("5511999998888")
        await asyncio.sleep(0.001)
        second = await store.put_whitelist_entry("5511999998888")

        assert second.created_at == first.created_at
        assert len(await store.list_whitelist_entries()) == 1

    @pytest.mark.asyncio
    async def test_list_newest_first_with_limit(self) -> None:
        """Lista em ordem decrescente de createdAt, respeitando o limite."""
        store = MemoryAuthorizationStore()
        for phone in ("1110000", "2220000", "3330000"):
            await store.put_whitelist_entry(phone)
            await asyncio.sleep(0.001)

        entries = await store.list_whitelist_entries(limit=2)

        assert [entry.phone for entry in entries] == ["3330000", "2220000"]

    @pytest.mark.asyncio
    async def test_remove_absent_is_noop(self) -> None:
        """Remover número inexistente não levanta."""
        store = MemoryAuthorizationStore()
        await store.remove_whitelist_entry("5511999998888")

        assert await store.is_whitelisted("5511999998888") is False


class TestMemoryBindings:
    """Testes dos vínculos do MemoryAuthorizationStore."""

    @pytest.mark.asyncio
    async def test_put_and_get_binding(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_binding("5511999998888", 42)

        binding = await store.get_binding("5511999998888")

        assert binding is not None
        assert binding.chat_handle == 42

    @pytest.mark.asyncio
    async def test_last_writer_wins(self) -> None:
        """Segundo vínculo para o mesmo número substitui o primeiro."""
        store = MemoryAuthorizationStore()
        await store.put_binding("5511999998888", 1)
        await store.put_binding("5511999998888", 2)

        binding = await store.get_binding("5511999998888")

        assert binding is not None
        assert binding.chat_handle == 2

    @pytest.mark.asyncio
    async def test_removing_whitelist_keeps_binding(self) -> None:
        """Remover da whitelist não apaga o vínculo existente."""
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        await store.put_binding("5511999998888", 42)

        await store.remove_whitelist_entry("5511999998888")

        assert await store.get_binding("5511999998888") is not None

    @pytest.mark.asyncio
    async def test_missing_binding_returns_none(self) -> None:
        store = MemoryAuthorizationStore()
        assert await store.get_binding("5511999998888") is None
