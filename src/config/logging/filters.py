"""Filters de logging do Registra_Bot.

- CorrelationIdFilter: injeta correlation_id e service em cada record
- PhoneMaskFilter: garante que telefones passados via `extra` saiam mascarados
- mask_phone: único mascaramento de telefone usado em logs
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Campos de `extra` que podem carregar telefone
PHONE_FIELDS = ("phone", "raw_phone")

VISIBLE_SUFFIX = 4

_CLEAR_DIGITS = re.compile(r"\d{%d,}" % (VISIBLE_SUFFIX + 1))


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Enriquece o record com correlation_id e nome do serviço.

    Um correlation_id explícito (via `extra`) vence o do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.correlation_id_getter = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", ""):
            record.correlation_id = self.correlation_id_getter()
        record.service = self.service_name
        return True


def mask_phone(key: str) -> str:
    """Mascara telefone para logs (sem PII): mantém só os 4 últimos dígitos."""
    if len(key) <= VISIBLE_SUFFIX:
        return "*" * len(key)
    return "*" * (len(key) - VISIBLE_SUFFIX) + key[-VISIBLE_SUFFIX:]


def mask_clear_digits(value: str) -> str:
    """Aplica mask_phone a cada sequência de 5+ dígitos dentro do texto."""
    return _CLEAR_DIGITS.sub(lambda match: mask_phone(match.group(0)), value)


class PhoneMaskFilter(logging.Filter):
    """Mascara campos de telefone que chegaram em claro no record.

    Valores já mascarados (ex: "*********8888") passam intactos.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for field in PHONE_FIELDS:
            value = getattr(record, field, None)
            if isinstance(value, str) and value:
                setattr(record, field, mask_clear_digits(value))
        return True
