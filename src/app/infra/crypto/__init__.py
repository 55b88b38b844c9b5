"""Primitivas de segurança: credenciais de sessão e comparação de segredos."""

from app.infra.crypto.session import (
    SessionAuthenticator,
    SessionClaims,
    extract_session_token,
)
from app.infra.crypto.signature import secrets_match

__all__ = [
    "SessionAuthenticator",
    "SessionClaims",
    "extract_session_token",
    "secrets_match",
]
