"""Logging estruturado (JSON) do Registra_Bot.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="registra_bot")
    logger = get_logger(__name__)
"""

from config.logging.config import configure_logging, get_logger, log_absorbed_failure
from config.logging.filters import (
    CorrelationIdFilter,
    PhoneMaskFilter,
    mask_clear_digits,
    mask_phone,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "PhoneMaskFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_absorbed_failure",
    "mask_clear_digits",
    "mask_phone",
]
