"""Settings base do Registra_Bot.

Ambiente, identificação do serviço nos logs, bind do servidor HTTP e
localização das páginas estáticas do painel.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns ao serviço.

    Attributes:
        environment: development|staging|production (ENVIRONMENT)
        service_name: Nome do serviço nos logs e no /health (SERVICE_NAME)
        log_level: Nível do root logger (LOG_LEVEL)
        gcp_project: Projeto GCP, usado pelo Firestore via ADC (GCP_PROJECT)
        public_dir: Diretório de login.html/dashboard.html (PUBLIC_DIR)
        host: Interface do uvicorn (HOST)
        port: Porta do uvicorn (PORT)
    """

    environment: Environment = "development"
    service_name: str = "registra-bot"
    log_level: str = "INFO"
    gcp_project: str = ""
    public_dir: str = "public"
    host: str = "0.0.0.0"
    port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Staging/production falham rápido em configuração inválida."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")
        if not self.public_dir:
            errors.append("PUBLIC_DIR não pode ser vazio")
        return errors


def _parse_environment(raw: str) -> Environment:
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "registra-bot"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        gcp_project=os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        public_dir=os.getenv("PUBLIC_DIR", "public"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_parse_port(os.getenv("PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
