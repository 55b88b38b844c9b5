"""Credenciais de sessão do admin: JWT HS256 assinado e com validade.

O autenticador é stateless: não rastreia revogação. Logout é descarte
do lado do cliente (cookie limpo).

Uso:
    authenticator = SessionAuthenticator(secret=settings.jwt_secret)
    token = authenticator.issue(SessionClaims(role="admin", subject="admin"))
    claims = authenticator.verify(token)  # UnauthenticatedError se inválido
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import jwt

from app.domain.outcomes import ErrorKind, Failure, Success
from utils.errors import ConfigMissingError, UnauthenticatedError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
DEFAULT_SESSION_TTL = timedelta(days=7)
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True, slots=True)
class SessionClaims:
    """Claims embutidas na credencial."""

    role: str
    subject: str
    expires_at: datetime | None = None


def extract_session_token(
    authorization_header: str | None,
    cookie_token: str | None,
) -> str | None:
    """Extrai token candidato do header Bearer ou do cookie.

    Header tem precedência quando ambos estão presentes. Função total:
    retorna None quando não há candidato utilizável.
    """
    if authorization_header and authorization_header.startswith(BEARER_PREFIX):
        bearer = authorization_header[len(BEARER_PREFIX):].strip()
        if bearer:
            return bearer
    if cookie_token and cookie_token.strip():
        return cookie_token.strip()
    return None


class SessionAuthenticator:
    """Emite e valida credenciais de sessão.

    Args:
        secret: Segredo de assinatura (JWT_SECRET)
        ttl: Janela de validade (default 7 dias)
        cookie_name: Nome do cookie de sessão
        clock: Relógio injetável (testes)

    Raises:
        ConfigMissingError: Se o segredo não estiver configurado
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        cookie_name: str = "token",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ConfigMissingError("JWT_SECRET não configurado")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(UTC))
        self.cookie_name = cookie_name

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, claims: SessionClaims) -> str:
        """Gera token assinado com expiração em now + ttl."""
        issued_at = self._clock()
        payload = {
            "role": claims.role,
            "sub": claims.subject,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str | None) -> SessionClaims:
        """Valida token por completo (tudo ou nada).

        Raises:
            UnauthenticatedError: ausente, malformado, expirado ou assinatura inválida
        """
        if not token:
            raise UnauthenticatedError("missing_token")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as exc:
            raise UnauthenticatedError(type(exc).__name__) from exc

        role = payload.get("role")
        if not isinstance(role, str) or not role:
            raise UnauthenticatedError("missing_role")
        return SessionClaims(
            role=role,
            subject=str(payload["sub"]),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )

    def authenticate_request(
        self,
        headers: Mapping[str, str],
        cookies: Mapping[str, str],
    ) -> Success[SessionClaims] | Failure:
        """Extrai credencial do request e valida.

        Qualquer falha vira o mesmo Failure(Unauthenticated), sem detalhe
        que permita distinguir o motivo.
        """
        token = extract_session_token(
            headers.get("authorization"),
            cookies.get(self.cookie_name),
        )
        try:
            claims = self.verify(token)
        except UnauthenticatedError as exc:
            logger.info("session_rejected", extra={"reason": str(exc)})
            return Failure(ErrorKind.UNAUTHENTICATED)
        return Success(claims)
