"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_inbound_use_case

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()

    # Obter dependências
    use_case = get_inbound_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_telegram_settings,
)
from utils.errors import ConfigMissingError, StoreUnavailableError

if TYPE_CHECKING:
    from app.infra.crypto import SessionAuthenticator
    from app.protocols import AuthorizationStoreProtocol, MessageDispatcherProtocol
    from app.use_cases.admin import AdminLoginUseCase, WhitelistAdminUseCase
    from app.use_cases.registration import ProcessInboundContactUseCase

# Nome do serviço para logs
SERVICE_NAME = "registra_bot"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging em DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Credenciais do admin, segredo de sessão e token do bot são obrigatórios
    em qualquer ambiente. Problemas de Firestore bloqueiam só em
    `staging`/`production`; em `development` ficam como alerta.

    Raises:
        ConfigMissingError: Configuração obrigatória ausente ou inválida
    """
    base = get_base_settings()
    environment = base.environment

    fatal: list[str] = []
    fatal.extend(f"base: {error}" for error in base.validate())
    fatal.extend(f"auth: {error}" for error in get_auth_settings().validate())
    fatal.extend(f"telegram: {error}" for error in get_telegram_settings().validate())

    firestore_errors = [
        f"firestore: {error}"
        for error in get_firestore_settings().validate(base.gcp_project)
    ]
    if base.is_strict:
        fatal.extend(firestore_errors)
    elif firestore_errors:
        logger.warning(
            "settings_validation_warning",
            extra={
                "component": "bootstrap",
                "environment": environment,
                "errors": firestore_errors,
            },
        )

    if not fatal:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(fatal),
            "errors": fatal,
        },
    )
    details = "\n".join(f"- {error}" for error in fatal)
    raise ConfigMissingError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_authorization_store() -> AuthorizationStoreProtocol:
    """Obtém store de autorização (singleton).

    Falha ao construir o client (credenciais, JSON da service account,
    projeto) vira StoreUnavailableError e não é cacheada.

    Raises:
        StoreUnavailableError: Backend configurado não pôde ser inicializado
    """
    from app.bootstrap.dependencies import create_authorization_store

    try:
        return create_authorization_store()
    except (GoogleAuthError, GoogleAPIError, ValueError) as exc:
        logger.warning(
            "authorization_store_init_failed",
            extra={"component": "bootstrap", "error_type": type(exc).__name__},
        )
        raise StoreUnavailableError("Store de autorização indisponível") from exc


@lru_cache(maxsize=1)
def get_message_dispatcher() -> MessageDispatcherProtocol:
    """Obtém dispatcher outbound (singleton)."""
    from app.bootstrap.dependencies import create_message_dispatcher
    return create_message_dispatcher()


@lru_cache(maxsize=1)
def get_session_authenticator() -> SessionAuthenticator:
    """Obtém autenticador de sessão (singleton).

    Raises:
        ConfigMissingError: Se JWT_SECRET não estiver configurado
    """
    from app.bootstrap.dependencies import create_session_authenticator
    return create_session_authenticator()


@lru_cache(maxsize=1)
def get_whitelist_admin_use_case() -> WhitelistAdminUseCase:
    from app.bootstrap.dependencies import create_whitelist_admin_use_case
    return create_whitelist_admin_use_case(get_authorization_store(), get_message_dispatcher())


@lru_cache(maxsize=1)
def get_admin_login_use_case() -> AdminLoginUseCase:
    """Raises ConfigMissingError se credenciais ou segredo faltarem."""
    from app.bootstrap.dependencies import create_admin_login_use_case
    return create_admin_login_use_case(get_session_authenticator())


@lru_cache(maxsize=1)
def get_inbound_use_case() -> ProcessInboundContactUseCase:
    """Obtém use case de cadastro inbound (singleton)."""
    from app.bootstrap.dependencies import create_inbound_use_case
    return create_inbound_use_case(
        get_authorization_store(),
        get_message_dispatcher(),
        get_whitelist_admin_use_case(),
    )
