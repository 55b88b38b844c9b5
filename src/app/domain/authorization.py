"""Entidades de autorização persistidas no Firestore.

- WhitelistEntry: número autorizado pelo admin (collection bot_numbers)
- Binding: vínculo número -> chat do Telegram (collection telegram_subscribers)

Os nomes de campo persistidos (createdAt, chatId, updatedAt) são mantidos
em camelCase para compatibilidade com documentos já existentes.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Identificador opaco do chat (Telegram usa inteiro; aceitamos string)
ChatHandle = int | str


def utcnow_iso() -> str:
    """Timestamp ISO-8601 em UTC (ordem lexicográfica == ordem temporal)."""
    return datetime.now(UTC).isoformat()


class WhitelistEntry(BaseModel):
    """Número autorizado a se registrar no bot."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    phone: str = Field(..., pattern=r"^\d+$")
    created_at: str = Field(default_factory=utcnow_iso, alias="createdAt")

    def to_firestore_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_firestore_dict(cls, data: dict[str, Any]) -> WhitelistEntry:
        return cls.model_validate(data)


class Binding(BaseModel):
    """Vínculo durável entre número autorizado e o chat de onde ele falou."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    phone: str = Field(..., pattern=r"^\d+$")
    chat_handle: ChatHandle | None = Field(default=None, alias="chatId")
    updated_at: str = Field(default_factory=utcnow_iso, alias="updatedAt")

    def to_firestore_dict(self) -> dict[str, Any]:
        """Dict para merge no Firestore (sem None, preserva campos ausentes)."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore_dict(cls, data: dict[str, Any]) -> Binding:
        return cls.model_validate(data)
