"""Resultados discriminados para operações por request.

Separa desfechos esperados (validação, "não encontrado", credencial
inválida) de falhas inesperadas (store/transporte), permitindo políticas
distintas por caminho: o admin reporta tudo, o webhook absorve tudo.

Uso:
    result = await use_case.add_number(raw_phone)
    if isinstance(result, Failure):
        ...  # result.kind, result.detail
    else:
        entry = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Taxonomia de erros exposta ao chamador (machine-readable)."""

    INVALID_PHONE = "InvalidPhone"
    MESSAGE_REQUIRED = "MessageRequired"
    UNAUTHENTICATED = "Unauthenticated"
    INVALID_CREDENTIALS = "InvalidCredentials"
    NOT_REGISTERED = "NotRegistered"
    STORE_UNAVAILABLE = "StoreUnavailable"
    DISPATCH_FAILED = "DispatchFailed"
    CONFIG_MISSING = "ConfigMissing"


# Falhas de infraestrutura; o restante são rejeições esperadas
UNEXPECTED_KINDS = frozenset(
    {ErrorKind.STORE_UNAVAILABLE, ErrorKind.DISPATCH_FAILED, ErrorKind.CONFIG_MISSING}
)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Operação concluída."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Operação não concluída.

    Attributes:
        kind: Tipo do erro (ErrorKind)
        detail: Texto legível opcional, nunca com secrets ou credenciais
    """

    kind: ErrorKind
    detail: str = ""

    @property
    def is_expected(self) -> bool:
        return self.kind not in UNEXPECTED_KINDS
