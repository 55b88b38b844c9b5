"""Factories de clientes externos: Firestore e Telegram."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.telegram import TelegramHttpClient, create_telegram_http_client
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Firestore Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Usa a service account de FIREBASE_CONFIG quando presente; caso
    contrário, Application Default Credentials.

    Returns:
        Cliente Firestore
    """
    from google.cloud import firestore

    settings = get_firestore_settings()
    project_id = settings.project_id or get_base_settings().gcp_project or None

    if settings.credentials_json:
        from google.oauth2 import service_account

        info = json.loads(settings.credentials_json)
        credentials = service_account.Credentials.from_service_account_info(info)
        client = firestore.Client(
            project=project_id or info.get("project_id"),
            credentials=credentials,
        )
        logger.info(
            "firestore_client_created",
            extra={"project": client.project, "credentials": "service_account"},
        )
        return client

    client = firestore.Client(project=project_id)
    logger.info(
        "firestore_client_created",
        extra={"project": project_id, "credentials": "adc"},
    )
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Telegram Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_telegram_client() -> TelegramHttpClient:
    """Cria cliente da Bot API (singleton).

    Raises:
        ValueError: Se o token do bot não estiver configurado
    """
    client = create_telegram_http_client()
    logger.info("telegram_client_created")
    return client
