"""Middleware HTTP: correlation_id e log de acesso por requisição."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.observability import correlation_scope
from config.logging import mask_clear_digits

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"


def _safe_path(path: str) -> str:
    """Path sem telefone em claro (ex: DELETE /api/numbers/{phone})."""
    return mask_clear_digits(path)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Define correlation_id do request e devolve no header da resposta."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            started_at = time.perf_counter()
            response = await call_next(request)
            duration_ms = (time.perf_counter() - started_at) * 1000
            logger.info(
                "http_request",
                extra={
                    "method": request.method,
                    "path": _safe_path(request.url.path),
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                },
            )
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
