"""Use case de login do admin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.outcomes import ErrorKind, Failure, Success
from app.infra.crypto import SessionClaims, secrets_match
from utils.errors import ConfigMissingError

if TYPE_CHECKING:
    from app.infra.crypto import SessionAuthenticator

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class AdminLoginUseCase:
    """Confere o par usuário/senha configurado e emite a credencial de sessão.

    Raises:
        ConfigMissingError: Se usuário ou senha do admin não estiverem configurados
    """

    def __init__(
        self,
        admin_username: str,
        admin_password: str,
        authenticator: SessionAuthenticator,
    ) -> None:
        if not admin_username or not admin_password:
            raise ConfigMissingError("ADMIN_USERNAME/ADMIN_PASSWORD não configurados")
        self._username = admin_username
        self._password = admin_password
        self._authenticator = authenticator

    def login(self, username: object, password: object) -> Success[str] | Failure:
        """Retorna Success(token) se ambos os campos conferem exatamente."""
        username_ok = secrets_match(_as_text(username), self._username)
        password_ok = secrets_match(_as_text(password), self._password)
        if not (username_ok and password_ok):
            logger.warning("admin_login_rejected")
            return Failure(ErrorKind.INVALID_CREDENTIALS, "Credenciais inválidas")

        token = self._authenticator.issue(SessionClaims(role=ADMIN_ROLE, subject=self._username))
        logger.info("admin_login_ok")
        return Success(token)


def _as_text(value: object) -> str | None:
    """Texto comparável de um escalar JSON; null, objeto e lista não viram texto.

    Números e booleanos seguem a grafia do JSON: 1234 -> "1234",
    1.0 -> "1", true -> "true".
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return None
