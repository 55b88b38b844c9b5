"""Observabilidade: correlation_id dos logs estruturados."""

from app.observability.correlation import (
    accept_correlation_id,
    correlation_scope,
    get_correlation_id,
)

__all__ = [
    "accept_correlation_id",
    "correlation_scope",
    "get_correlation_id",
]
