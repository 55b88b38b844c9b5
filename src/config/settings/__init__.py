"""Agregador de settings do Registra_Bot.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Auth (painel admin)
from config.settings.auth import AuthSettings, get_auth_settings

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    AuthStoreBackend,
    FirestoreSettings,
    get_firestore_settings,
)

# Channel-specific settings
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    # Constants
    "TELEGRAM_API_BASE_URL",
    # Auth
    "AuthSettings",
    # Infrastructure
    "AuthStoreBackend",
    # Base
    "BaseSettings",
    "Environment",
    "FirestoreSettings",
    # Telegram
    "TelegramSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_firestore_settings",
    "get_telegram_settings",
]
