"""Exceções compartilhadas para falhas de infraestrutura e configuração."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class StoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar o store de autorização."""


class DispatchFailedError(InfrastructureError):
    """Falha no envio outbound (detalhe bruto do transporte na mensagem)."""


class ConfigMissingError(RuntimeError):
    """Configuração obrigatória ausente. Fatal no startup, nunca por request."""


class UnauthenticatedError(Exception):
    """Credencial de sessão ausente, malformada, expirada ou adulterada."""
