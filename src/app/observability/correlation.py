"""correlation_id por requisição, propagado para os logs.

Guardado em ContextVar: cada request (task asyncio) enxerga o próprio.
O valor vem do header `x-correlation-id` quando o cliente envia um
válido; caso contrário é gerado.
"""

from __future__ import annotations

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_CORRELATION_ID_LENGTH = 64

_ACCEPTED = re.compile(r"^[A-Za-z0-9._:-]+$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio fora de request)."""
    return _correlation_id.get()


def accept_correlation_id(candidate: str | None) -> str:
    """Aceita o id do cliente se for curto e seguro para log; senão gera UUID4."""
    if (
        candidate
        and len(candidate) <= MAX_CORRELATION_ID_LENGTH
        and _ACCEPTED.match(candidate)
    ):
        return candidate
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(candidate: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior na saída."""
    token = _correlation_id.set(accept_correlation_id(candidate))
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)
