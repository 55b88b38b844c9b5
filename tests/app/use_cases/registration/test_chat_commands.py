"""Testes dos comandos de chat do bot."""

from __future__ import annotations

from typing import Any

import pytest

from api.normalizers.telegram import extract_inbound_message
from app.infra.stores import MemoryAuthorizationStore
from app.use_cases.admin import WhitelistAdminUseCase
from app.use_cases.registration import (
    ChatCommandHandler,
    InboundOutcome,
    ProcessInboundContactUseCase,
    parse_command,
)
from tests.fakes.fake_dispatcher import FailingAuthorizationStore, FakeDispatcher

ADMIN_ID = 7


class _Normalizer:
    def extract(self, payload: dict[str, Any]):
        return extract_inbound_message(payload)


def _update(text: str, sender_id: int = ADMIN_ID) -> dict[str, Any]:
    return {"message": {"text": text, "chat": {"id": 42}, "from": {"id": sender_id}}}


def _use_case(store, dispatcher, welcome_text: str = "") -> ProcessInboundContactUseCase:
    handler = ChatCommandHandler(
        whitelist_admin=WhitelistAdminUseCase(store, dispatcher),
        dispatcher=dispatcher,
        admin_sender_ids={ADMIN_ID},
        welcome_text=welcome_text,
    )
    return ProcessInboundContactUseCase(
        normalizer=_Normalizer(),
        store=store,
        dispatcher=dispatcher,
        command_handler=handler,
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("/add 11 9999-8888", ("/add", "11 9999-8888")),
        ("/list@registra_bot", ("/list", "")),
        ("  /DEL 123 ", ("/del", "123")),
        ("5511999998888", None),
    ],
)
def test_parse_command(text: str, expected: tuple[str, str] | None) -> None:
    assert parse_command(text) == expected


class TestAdminCommands:
    """Comandos /add, /del e /list."""

    @pytest.mark.asyncio
    async def test_add_normalizes_and_persists(self) -> None:
        store = MemoryAuthorizationStore()
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update("/add +55 (11) 99999-8888"))

        assert result.outcome == InboundOutcome.COMMAND
        assert await store.is_whitelisted("5511999998888") is True
        assert dispatcher.sent[-1][1].endswith("5511999998888")

    @pytest.mark.asyncio
    async def test_add_without_number_replies_usage(self) -> None:
        store = MemoryAuthorizationStore()
        dispatcher = FakeDispatcher()

        await _use_case(store, dispatcher).execute(_update("/add"))

        assert "/add" in dispatcher.sent[-1][1]
        assert await store.list_whitelist_entries() == []

    @pytest.mark.asyncio
    async def test_del_removes_number(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        dispatcher = FakeDispatcher()

        await _use_case(store, dispatcher).execute(_update("/del 5511999998888"))

        assert await store.is_whitelisted("5511999998888") is False

    @pytest.mark.asyncio
    async def test_list_shows_numbers(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        dispatcher = FakeDispatcher()

        await _use_case(store, dispatcher).execute(_update("/list"))

        assert "- 5511999998888" in dispatcher.sent[-1][1]

    @pytest.mark.asyncio
    async def test_list_empty(self) -> None:
        dispatcher = FakeDispatcher()

        await _use_case(MemoryAuthorizationStore(), dispatcher).execute(_update("/list"))

        assert dispatcher.sent[-1][1] == "Nenhum número cadastrado."

    @pytest.mark.asyncio
    async def test_store_failure_replies_generic_error(self) -> None:
        dispatcher = FakeDispatcher()
        store = FailingAuthorizationStore(failing={"put_whitelist_entry"})

        result = await _use_case(store, dispatcher).execute(_update("/add 5511999998888"))

        assert result.outcome == InboundOutcome.COMMAND
        assert "Tente novamente" in dispatcher.sent[-1][1]

    @pytest.mark.asyncio
    async def test_non_admin_falls_through_to_registration(self) -> None:
        """Comando de quem não é admin segue o fluxo normal de cadastro."""
        store = MemoryAuthorizationStore()
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(
            _update("/add 5511999998888", sender_id=999)
        )

        assert result.outcome == InboundOutcome.REJECTED
        assert await store.is_whitelisted("5511999998888") is False


class TestStartCommand:
    """/start com e sem texto de boas-vindas."""

    @pytest.mark.asyncio
    async def test_start_with_welcome_text(self) -> None:
        dispatcher = FakeDispatcher()

        result = await _use_case(
            MemoryAuthorizationStore(), dispatcher, welcome_text="Envie seu número."
        ).execute(_update("/start", sender_id=999))

        assert result.outcome == InboundOutcome.COMMAND
        assert dispatcher.sent == [(42, "Envie seu número.")]

    @pytest.mark.asyncio
    async def test_start_without_welcome_text_is_ignored(self) -> None:
        dispatcher = FakeDispatcher()

        result = await _use_case(MemoryAuthorizationStore(), dispatcher).execute(
            _update("/start", sender_id=999)
        )

        assert result.outcome == InboundOutcome.IGNORED_NOT_PHONE
        assert dispatcher.sent == []
