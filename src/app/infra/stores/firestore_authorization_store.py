"""Firestore Authorization Store: whitelist e vínculos do bot.

Estrutura no Firestore:
    bot_numbers/{phone}            -> {phone, createdAt}
    telegram_subscribers/{phone}   -> {phone, chatId, updatedAt}

Características:
    - Chave do documento = telefone canônico (apenas dígitos)
    - Whitelist: create() atômico; reinserção preserva createdAt
    - Vínculo: set(merge=True), último a escrever vence
    - Erros do SDK viram StoreUnavailableError

Usa asyncio.to_thread pois o Firestore SDK síncrono não tem async nativo.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.api_core import exceptions as gcp_exceptions

from app.domain.authorization import Binding, ChatHandle, WhitelistEntry, utcnow_iso
from app.protocols.authorization_store import DEFAULT_LIST_LIMIT, AuthorizationStoreProtocol
from config.logging import mask_phone
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

WHITELIST_COLLECTION = "bot_numbers"
BINDINGS_COLLECTION = "telegram_subscribers"


class FirestoreAuthorizationStore(AuthorizationStoreProtocol):
    """Store de autorização usando Firestore.

    Args:
        firestore_client: Cliente Firestore
        whitelist_collection: Collection da whitelist (default: bot_numbers)
        bindings_collection: Collection de vínculos (default: telegram_subscribers)
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        whitelist_collection: str = WHITELIST_COLLECTION,
        bindings_collection: str = BINDINGS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._whitelist = whitelist_collection
        self._bindings = bindings_collection

    # ── Whitelist ────────────────────────────────────────────────────────────

    async def put_whitelist_entry(self, phone: str) -> WhitelistEntry:
        return await self._run("whitelist_put", phone, self._put_whitelist_entry_sync, phone)

    def _put_whitelist_entry_sync(self, phone: str) -> WhitelistEntry:
        entry = WhitelistEntry(phone=phone)
        doc_ref = self._db.collection(self._whitelist).document(phone)
        try:
            doc_ref.create(entry.to_firestore_dict())
        except gcp_exceptions.AlreadyExists:
            snapshot = doc_ref.get()
            data = snapshot.to_dict() if snapshot.exists else None
            if data:
                return WhitelistEntry.from_firestore_dict({"phone": phone, **data})
        return entry

    async def list_whitelist_entries(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> Sequence[WhitelistEntry]:
        return await self._run("whitelist_list", "", self._list_whitelist_sync, limit)

    def _list_whitelist_sync(self, limit: int) -> list[WhitelistEntry]:
        query = (
            self._db.collection(self._whitelist)
            .order_by("createdAt", direction="DESCENDING")
            .limit(limit)
        )
        entries: list[WhitelistEntry] = []
        for doc in query.stream():
            data = doc.to_dict() or {}
            entries.append(WhitelistEntry.from_firestore_dict({"phone": doc.id, **data}))
        return entries

    async def remove_whitelist_entry(self, phone: str) -> None:
        await self._run(
            "whitelist_remove",
            phone,
            lambda: self._db.collection(self._whitelist).document(phone).delete(),
        )

    async def is_whitelisted(self, phone: str) -> bool:
        snapshot = await self._run(
            "whitelist_check",
            phone,
            lambda: self._db.collection(self._whitelist).document(phone).get(),
        )
        return bool(snapshot.exists)

    # ── Vínculos ─────────────────────────────────────────────────────────────

    async def get_binding(self, phone: str) -> Binding | None:
        snapshot = await self._run(
            "binding_get",
            phone,
            lambda: self._db.collection(self._bindings).document(phone).get(),
        )
        if not snapshot.exists:
            return None
        data = snapshot.to_dict() or {}
        return Binding.from_firestore_dict({"phone": phone, **data})

    async def put_binding(self, phone: str, chat_handle: ChatHandle) -> Binding:
        binding = Binding(phone=phone, chat_handle=chat_handle, updated_at=utcnow_iso())
        await self._run(
            "binding_put",
            phone,
            lambda: self._db.collection(self._bindings)
            .document(phone)
            .set(binding.to_firestore_dict(), merge=True),
        )
        return binding

    # ── Helpers ──────────────────────────────────────────────────────────────

    async def _run(
        self,
        operation: str,
        phone: str,
        func: Callable[..., Any],
        *args: Any,
    ) -> Any:
        try:
            return await asyncio.to_thread(func, *args)
        except gcp_exceptions.GoogleAPIError as exc:
            logger.error(
                "authorization_store_error",
                extra={
                    "operation": operation,
                    "phone": mask_phone(phone),
                    "error_type": type(exc).__name__,
                },
            )
            raise StoreUnavailableError(f"{operation} falhou: {type(exc).__name__}") from exc
