"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"

DEFAULT_CONFIRMATION_TEXT = "Cadastro confirmado ✅"
DEFAULT_REJECTION_TEXT = "Este número não está cadastrado ❌"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        webhook_secret: Secret compartilhado do webhook (opcional)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        confirmation_text: Resposta para número autorizado
        rejection_text: Resposta para número fora da whitelist
        welcome_text: Resposta ao /start (vazio = ignora)
        admin_chat_ids: IDs de usuários Telegram com comandos /add /del /list
    """

    # Credenciais
    bot_token: str = ""
    webhook_secret: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL
    request_timeout_seconds: float = 10.0

    # Respostas do bot
    confirmation_text: str = DEFAULT_CONFIRMATION_TEXT
    rejection_text: str = DEFAULT_REJECTION_TEXT
    welcome_text: str = ""

    # Comandos de admin no chat
    admin_chat_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url}/bot{self.bot_token}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _parse_admin_ids(raw: str) -> frozenset[int]:
    """Converte "123, 456" em {123, 456}; ignora itens não numéricos."""
    ids: set[int] = set()
    for item in raw.split(","):
        value = item.strip()
        if value.lstrip("-").isdigit():
            ids.add(int(value))
    return frozenset(ids)


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", os.getenv("BOT_TOKEN", "")),
        webhook_secret=os.getenv("TELEGRAM_WEBHOOK_SECRET", os.getenv("WEBHOOK_SECRET", "")),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")),
        confirmation_text=os.getenv("TELEGRAM_CONFIRMATION_TEXT", DEFAULT_CONFIRMATION_TEXT),
        rejection_text=os.getenv("TELEGRAM_REJECTION_TEXT", DEFAULT_REJECTION_TEXT),
        welcome_text=os.getenv("TELEGRAM_WELCOME_TEXT", ""),
        admin_chat_ids=_parse_admin_ids(os.getenv("ADMIN_TELEGRAM_IDS", "")),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
