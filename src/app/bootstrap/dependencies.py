"""Factories de dependências: stores, autenticador e use cases.

Este módulo centraliza a criação de implementações concretas baseadas
nas configurações de ambiente.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client, create_telegram_client
from app.bootstrap.telegram_adapters import TelegramMessageDispatcher, TelegramUpdateNormalizer
from app.infra.crypto import SessionAuthenticator
from app.infra.stores import FirestoreAuthorizationStore, MemoryAuthorizationStore
from app.use_cases.admin import AdminLoginUseCase, WhitelistAdminUseCase
from app.use_cases.registration import ChatCommandHandler, ProcessInboundContactUseCase
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_telegram_settings,
)

if TYPE_CHECKING:
    from app.protocols import AuthorizationStoreProtocol, MessageDispatcherProtocol
    from config.settings import AuthSettings, FirestoreSettings, TelegramSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Authorization Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_authorization_store(
    settings: FirestoreSettings | None = None,
) -> AuthorizationStoreProtocol:
    """Cria store de autorização baseado na configuração.

    Lê AUTH_STORE_BACKEND (via FirestoreSettings):
    - "memory": MemoryAuthorizationStore (dev/test)
    - "firestore": FirestoreAuthorizationStore (staging/production)

    Returns:
        Implementação de AuthorizationStoreProtocol
    """
    firestore = settings or get_firestore_settings()

    if firestore.backend == "firestore":
        store = FirestoreAuthorizationStore(
            create_firestore_client(),
            whitelist_collection=firestore.collection_whitelist,
            bindings_collection=firestore.collection_bindings,
        )
        logger.info("authorization_store_created", extra={"backend": "firestore"})
        return store

    environment = get_base_settings().environment
    if environment != "development":
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": environment},
        )
    logger.info("authorization_store_created", extra={"backend": "memory"})
    return MemoryAuthorizationStore()


# ──────────────────────────────────────────────────────────────────────────────
# Outbound / Auth Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_message_dispatcher() -> MessageDispatcherProtocol:
    """Cria dispatcher Telegram com cliente HTTP lazy."""
    return TelegramMessageDispatcher(create_telegram_client)


def create_session_authenticator(settings: AuthSettings | None = None) -> SessionAuthenticator:
    """Cria autenticador de sessão.

    Raises:
        ConfigMissingError: Se JWT_SECRET não estiver configurado
    """
    auth = settings or get_auth_settings()
    return SessionAuthenticator(
        secret=auth.jwt_secret,
        ttl=timedelta(days=auth.session_ttl_days),
        cookie_name=auth.cookie_name,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Use Case Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_whitelist_admin_use_case(
    store: AuthorizationStoreProtocol,
    dispatcher: MessageDispatcherProtocol,
) -> WhitelistAdminUseCase:
    return WhitelistAdminUseCase(
        store=store,
        dispatcher=dispatcher,
        list_limit=get_firestore_settings().list_limit,
    )


def create_admin_login_use_case(
    authenticator: SessionAuthenticator,
    settings: AuthSettings | None = None,
) -> AdminLoginUseCase:
    """Raises ConfigMissingError se as credenciais do admin não existirem."""
    auth = settings or get_auth_settings()
    return AdminLoginUseCase(
        admin_username=auth.admin_username,
        admin_password=auth.admin_password,
        authenticator=authenticator,
    )


def create_inbound_use_case(
    store: AuthorizationStoreProtocol,
    dispatcher: MessageDispatcherProtocol,
    whitelist_admin: WhitelistAdminUseCase,
    settings: TelegramSettings | None = None,
) -> ProcessInboundContactUseCase:
    """Cria use case de cadastro; comandos de chat só com admins/boas-vindas configurados."""
    telegram = settings or get_telegram_settings()

    command_handler = None
    if telegram.admin_chat_ids or telegram.welcome_text:
        command_handler = ChatCommandHandler(
            whitelist_admin=whitelist_admin,
            dispatcher=dispatcher,
            admin_sender_ids=telegram.admin_chat_ids,
            welcome_text=telegram.welcome_text,
        )

    return ProcessInboundContactUseCase(
        normalizer=TelegramUpdateNormalizer(),
        store=store,
        dispatcher=dispatcher,
        confirmation_text=telegram.confirmation_text,
        rejection_text=telegram.rejection_text,
        command_handler=command_handler,
    )
