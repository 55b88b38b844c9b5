"""Testes do fluxo de cadastro inbound."""

from __future__ import annotations

from typing import Any

import pytest

from api.normalizers.telegram import extract_inbound_message
from app.domain.outcomes import ErrorKind
from app.infra.stores import MemoryAuthorizationStore
from app.use_cases.registration import InboundOutcome, ProcessInboundContactUseCase
from config.settings import TelegramSettings
from tests.fakes.fake_dispatcher import FailingAuthorizationStore, FakeDispatcher

CONFIRMATION = "Cadastro confirmado ✅"
REJECTION = "Este número não está cadastrado ❌"


class _Normalizer:
    def extract(self, payload: dict[str, Any]):
        return extract_inbound_message(payload)


def _update(text: str | None, chat_id: int = 42) -> dict[str, Any]:
    message: dict[str, Any] = {"chat": {"id": chat_id}, "from": {"id": 7}}
    if text is not None:
        message["text"] = text
    return {"update_id": 1, "message": message}


def _use_case(store, dispatcher) -> ProcessInboundContactUseCase:
    return ProcessInboundContactUseCase(
        normalizer=_Normalizer(),
        store=store,
        dispatcher=dispatcher,
        confirmation_text=CONFIRMATION,
        rejection_text=REJECTION,
    )


class TestAuthorizedNumber:
    """Número na whitelist: vincula e confirma."""

    @pytest.mark.asyncio
    async def test_binds_then_confirms(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("12345678900")
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update("+1 (234) 567-8900"))

        assert result.outcome == InboundOutcome.BOUND
        assert result.phone == "12345678900"
        assert result.notified is True
        binding = await store.get_binding("12345678900")
        assert binding is not None
        assert binding.chat_handle == 42
        assert dispatcher.sent == [(42, CONFIRMATION)]

    @pytest.mark.asyncio
    async def test_rebinding_from_another_chat_wins(self) -> None:
        """Mesmo número vindo de outro chat substitui o vínculo."""
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        use_case = _use_case(store, FakeDispatcher())

        await use_case.execute(_update("5511999998888", chat_id=1))
        await use_case.execute(_update("55 11 99999-8888", chat_id=2))

        binding = await store.get_binding("5511999998888")
        assert binding is not None
        assert binding.chat_handle == 2

    @pytest.mark.asyncio
    async def test_binding_failure_skips_confirmation(self) -> None:
        """Sem vínculo gravado não há confirmação."""
        store = FailingAuthorizationStore(failing={"put_binding"})
        await store.put_whitelist_entry("5511999998888")
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update("5511999998888"))

        assert result.outcome == InboundOutcome.FAILED
        assert result.failure is not None
        assert result.failure.kind == ErrorKind.STORE_UNAVAILABLE
        assert dispatcher.sent == []

    @pytest.mark.asyncio
    async def test_confirmation_failure_keeps_binding(self) -> None:
        """Falha de envio é absorvida; vínculo permanece."""
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        dispatcher = FakeDispatcher(fail_with="Forbidden: bot was blocked by the user")

        result = await _use_case(store, dispatcher).execute(_update("5511999998888"))

        assert result.outcome == InboundOutcome.BOUND
        assert result.notified is False
        assert result.failure is not None
        assert result.failure.kind == ErrorKind.DISPATCH_FAILED
        assert await store.get_binding("5511999998888") is not None


class TestUnauthorizedNumber:
    """Número fora da whitelist: recusa sem vínculo."""

    @pytest.mark.asyncio
    async def test_rejects_without_binding(self) -> None:
        store = MemoryAuthorizationStore()
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update("5511999998888"))

        assert result.outcome == InboundOutcome.REJECTED
        assert dispatcher.sent == [(42, REJECTION)]
        assert await store.get_binding("5511999998888") is None

    @pytest.mark.asyncio
    async def test_removed_number_is_rejected_but_old_binding_stays(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        use_case = _use_case(store, FakeDispatcher())
        await use_case.execute(_update("5511999998888"))
        await store.remove_whitelist_entry("5511999998888")

        result = await use_case.execute(_update("5511999998888", chat_id=99))

        assert result.outcome == InboundOutcome.REJECTED
        binding = await store.get_binding("5511999998888")
        assert binding is not None
        assert binding.chat_handle == 42

    @pytest.mark.asyncio
    async def test_lookup_failure_sends_nothing(self) -> None:
        store = FailingAuthorizationStore(failing={"is_whitelisted"})
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update("5511999998888"))

        assert result.outcome == InboundOutcome.FAILED
        assert dispatcher.sent == []


class TestIgnoredMessages:
    """Mensagens sem texto ou com poucos dígitos não geram resposta."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["oi, tudo bem?", "123456", "código 12-34", ""])
    async def test_conversation_is_ignored(self, text: str) -> None:
        store = MemoryAuthorizationStore()
        dispatcher = FakeDispatcher()

        result = await _use_case(store, dispatcher).execute(_update(text))

        assert result.outcome in {InboundOutcome.IGNORED_NOT_PHONE, InboundOutcome.IGNORED_NO_TEXT}
        assert dispatcher.sent == []

    @pytest.mark.asyncio
    async def test_update_without_text_is_ignored(self) -> None:
        dispatcher = FakeDispatcher()

        result = await _use_case(MemoryAuthorizationStore(), dispatcher).execute(_update(None))

        assert result.outcome == InboundOutcome.IGNORED_NO_TEXT
        assert dispatcher.sent == []

    @pytest.mark.asyncio
    async def test_seven_digits_reaches_lookup(self) -> None:
        dispatcher = FakeDispatcher()

        result = await _use_case(MemoryAuthorizationStore(), dispatcher).execute(
            _update("1234567")
        )

        assert result.outcome == InboundOutcome.REJECTED


class TestDefaultTexts:
    """Sem textos explícitos, o use case responde com os padrões das settings."""

    @pytest.mark.asyncio
    async def test_defaults_match_telegram_settings(self) -> None:
        store = MemoryAuthorizationStore()
        await store.put_whitelist_entry("5511999998888")
        dispatcher = FakeDispatcher()
        use_case = ProcessInboundContactUseCase(
            normalizer=_Normalizer(), store=store, dispatcher=dispatcher
        )
        settings = TelegramSettings(bot_token="123:ABC")

        await use_case.execute(_update("5511999998888", chat_id=1))
        await use_case.execute(_update("5511000000000", chat_id=2))

        assert dispatcher.sent == [
            (1, settings.confirmation_text),
            (2, settings.rejection_text),
        ]
