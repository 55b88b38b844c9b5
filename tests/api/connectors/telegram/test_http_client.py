"""Testes do cliente HTTP da Bot API com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.telegram import HttpError, TelegramHttpClient, create_telegram_http_client
from config.settings import TelegramSettings
from utils.errors import DispatchFailedError

ENDPOINT = "https://api.telegram.test/bot123:ABC"


def _client(handler) -> TelegramHttpClient:
    return TelegramHttpClient(ENDPOINT, timeout_seconds=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_message_posts_chat_id_and_text() -> None:
    captured: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"ok": True, "result": {"message_id": 9}})

    result = await _client(handler).send_message(42, "Cadastro confirmado ✅")

    assert captured["url"] == f"{ENDPOINT}/sendMessage"
    assert captured["body"] == {"chat_id": 42, "text": "Cadastro confirmado ✅"}
    assert result == {"message_id": 9}


@pytest.mark.asyncio
async def test_bot_api_error_carries_description() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            403,
            json={"ok": False, "error_code": 403, "description": "Forbidden: bot was blocked by the user"},
        )

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).send_message(42, "oi")

    assert "bot was blocked by the user" in str(exc_info.value)
    assert exc_info.value.status_code == 403
    assert isinstance(exc_info.value, DispatchFailedError)


@pytest.mark.asyncio
async def test_ok_false_with_200_is_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": False, "description": "Bad Request: chat not found"})

    with pytest.raises(HttpError, match="chat not found"):
        await _client(handler).send_message(42, "oi")


@pytest.mark.asyncio
async def test_non_json_error_response() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).send_message(42, "oi")

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_timeout_becomes_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timeout", request=request)

    with pytest.raises(HttpError, match="telegram_timeout"):
        await _client(handler).send_message(42, "oi")


@pytest.mark.asyncio
async def test_connection_error_becomes_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(HttpError, match="telegram_connection_error"):
        await _client(handler).send_message(42, "oi")


def test_factory_requires_bot_token() -> None:
    with pytest.raises(ValueError):
        create_telegram_http_client(TelegramSettings(bot_token=""))


def test_factory_builds_endpoint_from_settings() -> None:
    client = create_telegram_http_client(
        TelegramSettings(bot_token="123:ABC", api_base_url="https://api.telegram.test")
    )
    assert client._api_endpoint == ENDPOINT
