"""Agregador de settings de infraestrutura GCP."""

from __future__ import annotations

from config.settings.infra.firestore import (
    AuthStoreBackend,
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    "AuthStoreBackend",
    "FirestoreSettings",
    "get_firestore_settings",
]
