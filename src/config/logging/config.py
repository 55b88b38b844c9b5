"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap (app/bootstrap/)
    configure_logging(level="INFO", service_name="registra_bot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("whitelist_entry_added", extra={"phone": mask_phone(phone)})
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, PhoneMaskFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "registra_bot"

# Loggers de bibliotecas que poluem o stdout em DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "google.auth", "urllib3")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON em stdout no root logger.

    Idempotente: chamadas seguidas substituem o handler anterior.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service` em todo log.
        correlation_id_getter: Fonte do correlation_id do contexto atual.

    Raises:
        ValueError: Nível de log desconhecido.
    """
    level_name = level.strip().upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(PhoneMaskFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    quiet_level = max(logging.getLevelName(level_name), logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_absorbed_failure(
    logger: logging.Logger,
    component: str,
    reason: str,
    error_type: str | None = None,
) -> None:
    """Registra uma falha que o transporte recebe como sucesso.

    O webhook do Telegram sempre responde 200; este log é o único rastro
    de store fora do ar, envio recusado ou payload inválido.

    Args:
        logger: Logger do módulo chamador.
        component: Origem da falha (ex: "telegram_webhook").
        reason: Motivo sem PII (ex: "store_unavailable").
        error_type: Nome da classe da exceção, quando houver.
    """
    extra: dict[str, object] = {
        "failure_absorbed": True,
        "component": component,
        "reason": reason,
    }
    if error_type:
        extra["error_type"] = error_type

    logger.warning("failure_absorbed", extra=extra)
