"""Settings do Firestore.

Configurações para Google Cloud Firestore (store de autorização).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

AuthStoreBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        credentials_json: JSON da service account (FIREBASE_CONFIG); vazio = ADC
        collection_whitelist: Collection da whitelist
        collection_bindings: Collection de vínculos número -> chat
        list_limit: Máximo de itens na listagem da whitelist
        backend: Backend do store de autorização (memory|firestore)
    """

    project_id: str = ""
    credentials_json: str = ""
    collection_whitelist: str = "bot_numbers"
    collection_bindings: str = "telegram_subscribers"
    list_limit: int = 300
    backend: AuthStoreBackend = "memory"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.backend != "firestore":
            return errors

        if self.credentials_json:
            try:
                json.loads(self.credentials_json)
            except json.JSONDecodeError:
                errors.append("FIREBASE_CONFIG deve ser uma string JSON válida")
        elif not (self.project_id or gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")

        if self.list_limit <= 0:
            errors.append("WHITELIST_LIST_LIMIT deve ser > 0")

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    default_backend = "firestore" if environment in ("staging", "production", "prod") else "memory"
    backend = os.getenv("AUTH_STORE_BACKEND", default_backend).lower()
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        credentials_json=os.getenv("FIREBASE_CONFIG", ""),
        collection_whitelist=os.getenv("FIRESTORE_COLLECTION_WHITELIST", "bot_numbers"),
        collection_bindings=os.getenv(
            "FIRESTORE_COLLECTION_BINDINGS", "telegram_subscribers"
        ),
        list_limit=int(os.getenv("WHITELIST_LIST_LIMIT", "300")),
        backend="firestore" if backend == "firestore" else "memory",
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
