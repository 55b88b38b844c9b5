"""Testes de carregamento das settings a partir do ambiente."""

from __future__ import annotations

import pytest

from config.settings.auth import _load_auth_from_env
from config.settings.base.core import _load_base_from_env
from config.settings.infra.firestore import FirestoreSettings, _load_firestore_from_env
from config.settings.telegram import TelegramSettings, _load_from_env, _parse_admin_ids


class TestBaseSettings:
    """BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("stage", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert _load_base_from_env().environment == expected


class TestAuthSettings:
    """AuthSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("SESSION_TTL_DAYS", "SESSION_COOKIE_NAME", "DASHBOARD_REQUIRES_SESSION"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("ENVIRONMENT", "development")

        settings = _load_auth_from_env()

        assert settings.session_ttl_days == 7
        assert settings.session_max_age_seconds == 604800
        assert settings.cookie_name == "token"
        assert settings.cookie_secure is False
        assert settings.dashboard_requires_session is True

    def test_secure_cookie_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert _load_auth_from_env().cookie_secure is True

    def test_dashboard_gate_can_be_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DASHBOARD_REQUIRES_SESSION", "false")
        assert _load_auth_from_env().dashboard_requires_session is False


class TestTelegramSettings:
    """TelegramSettings."""

    def test_api_endpoint_requires_token(self) -> None:
        with pytest.raises(ValueError):
            _ = TelegramSettings().api_endpoint

    def test_api_endpoint(self) -> None:
        settings = TelegramSettings(bot_token="123:ABC")
        assert settings.api_endpoint == "https://api.telegram.org/bot123:ABC"

    def test_legacy_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        monkeypatch.delenv("TELEGRAM_WEBHOOK_SECRET", raising=False)
        monkeypatch.setenv("BOT_TOKEN", "legacy-token")
        monkeypatch.setenv("WEBHOOK_SECRET", "legacy-secret")

        settings = _load_from_env()

        assert settings.bot_token == "legacy-token"
        assert settings.webhook_secret == "legacy-secret"

    def test_parse_admin_ids_skips_garbage(self) -> None:
        assert _parse_admin_ids("123, abc, -45,,") == frozenset({123, -45})

    def test_validate_reports_missing_token(self) -> None:
        assert TelegramSettings().validate() == ["TELEGRAM_BOT_TOKEN não configurado"]


class TestFirestoreSettings:
    """FirestoreSettings."""

    def test_backend_defaults_by_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AUTH_STORE_BACKEND", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "development")
        assert _load_firestore_from_env().backend == "memory"

        monkeypatch.setenv("ENVIRONMENT", "production")
        assert _load_firestore_from_env().backend == "firestore"

    def test_default_collections_and_limit(self) -> None:
        settings = FirestoreSettings()
        assert settings.collection_whitelist == "bot_numbers"
        assert settings.collection_bindings == "telegram_subscribers"
        assert settings.list_limit == 300

    def test_memory_backend_skips_validation(self) -> None:
        assert FirestoreSettings(backend="memory").validate("") == []

    def test_firestore_needs_project_or_credentials(self) -> None:
        assert FirestoreSettings(backend="firestore").validate("")
        assert FirestoreSettings(backend="firestore").validate("my-project") == []

    def test_invalid_credentials_json(self) -> None:
        errors = FirestoreSettings(backend="firestore", credentials_json="{x").validate("p")
        assert errors == ["FIREBASE_CONFIG deve ser uma string JSON válida"]


class TestBaseSettingsValidation:
    """BaseSettings.validate e bind do servidor."""

    def test_defaults_are_valid(self) -> None:
        from config.settings import BaseSettings

        assert BaseSettings().validate() == []

    def test_invalid_port_and_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        errors = _load_base_from_env().validate()

        assert "PORT fora do intervalo: 0" in errors
        assert "LOG_LEVEL inválido: VERBOSE" in errors

    def test_host_and_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9000")

        settings = _load_base_from_env()

        assert (settings.host, settings.port) == ("127.0.0.1", 9000)
