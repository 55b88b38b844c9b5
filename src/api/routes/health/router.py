"""Probes de liveness e readiness.

/health responde enquanto o processo está de pé. /ready só fica verde
quando o store de autorização responde a uma leitura pontual e as
configurações do bot e do painel estão presentes.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_auth_settings, get_base_settings, get_telegram_settings
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from app.protocols import AuthorizationStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_PROBE_TIMEOUT_SECONDS = 3.0

# Chave que nunca é um telefone válido; a leitura só prova conectividade
_PROBE_KEY = "0"


def _get_store() -> AuthorizationStoreProtocol:
    from app.bootstrap import get_authorization_store

    return get_authorization_store()


class HealthResponse(BaseModel):
    """Resposta do liveness probe."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class ProbeResult:
    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "latency_ms": self.latency_ms, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    checks = {
        "authorization_store": await _probe_store(),
        "telegram": _probe_config(get_telegram_settings().validate()),
        "admin_auth": _probe_config(get_auth_settings().validate()),
    }
    ready = all(check.status == "ok" for check in checks.values())

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _probe_config(errors: list[str]) -> ProbeResult:
    if errors:
        return ProbeResult(status="failed", error="not_configured")
    return ProbeResult(status="ok")


async def _probe_store() -> ProbeResult:
    started_at = time.perf_counter()
    try:
        store = _get_store()
        await asyncio.wait_for(
            store.is_whitelisted(_PROBE_KEY),
            timeout=STORE_PROBE_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        return ProbeResult(status="failed", error="timeout")
    except StoreUnavailableError as exc:
        logger.warning("readiness_store_unavailable", extra={"error_type": type(exc).__name__})
        return ProbeResult(status="failed", error="store_unavailable")
    except Exception as exc:
        # falha ao construir o client (credenciais, projeto)
        logger.warning("readiness_store_init_failed", extra={"error_type": type(exc).__name__})
        return ProbeResult(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return ProbeResult(status="ok", latency_ms=round(latency_ms, 2))
