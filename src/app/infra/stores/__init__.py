"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - firestore_authorization_store: Whitelist e vínculos usando Firestore
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_authorization_store import FirestoreAuthorizationStore
from app.infra.stores.memory_stores import MemoryAuthorizationStore

__all__ = [
    # Firestore
    "FirestoreAuthorizationStore",
    # Memory (dev/test)
    "MemoryAuthorizationStore",
]
