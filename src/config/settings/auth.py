"""Settings de autenticação do painel admin.

Par de credenciais do admin, segredo de assinatura das sessões e
política do cookie/dashboard.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AuthSettings:
    """Configurações de autenticação.

    Attributes:
        admin_username: Usuário do admin (ADMIN_USERNAME)
        admin_password: Senha do admin (ADMIN_PASSWORD)
        jwt_secret: Segredo de assinatura das sessões (JWT_SECRET)
        session_ttl_days: Validade da sessão em dias
        cookie_name: Nome do cookie de sessão
        cookie_secure: Cookie só via HTTPS (ligado em produção)
        dashboard_requires_session: Protege a página /dashboard além das APIs
    """

    admin_username: str = ""
    admin_password: str = ""
    jwt_secret: str = ""
    session_ttl_days: int = 7
    cookie_name: str = "token"
    cookie_secure: bool = False
    dashboard_requires_session: bool = True

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_ttl_days * 24 * 60 * 60

    def validate(self) -> list[str]:
        """Valida credenciais obrigatórias.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.admin_username or not self.admin_password:
            errors.append("ADMIN_USERNAME/ADMIN_PASSWORD não configurados")
        if not self.jwt_secret:
            errors.append("JWT_SECRET não configurado")
        if self.session_ttl_days <= 0:
            errors.append("SESSION_TTL_DAYS deve ser > 0")
        return errors


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return AuthSettings(
        admin_username=os.getenv("ADMIN_USERNAME", ""),
        admin_password=os.getenv("ADMIN_PASSWORD", ""),
        jwt_secret=os.getenv("JWT_SECRET", ""),
        session_ttl_days=int(os.getenv("SESSION_TTL_DAYS", "7")),
        cookie_name=os.getenv("SESSION_COOKIE_NAME", "token"),
        cookie_secure=environment in ("production", "prod"),
        dashboard_requires_session=os.getenv("DASHBOARD_REQUIRES_SESSION", "true").lower()
        in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
