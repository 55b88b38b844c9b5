"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigMissingError,
    DispatchFailedError,
    InfrastructureError,
    StoreUnavailableError,
    UnauthenticatedError,
)

__all__ = [
    "ConfigMissingError",
    "DispatchFailedError",
    "InfrastructureError",
    "StoreUnavailableError",
    "UnauthenticatedError",
]
