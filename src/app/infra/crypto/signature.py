"""Comparação de segredos em tempo constante."""

from __future__ import annotations

import hmac


def secrets_match(provided: str | None, expected: str) -> bool:
    """Compara segredo recebido com o configurado sem vazar timing.

    Args:
        provided: Valor recebido (query, header, formulário)
        expected: Valor configurado no servidor

    Returns:
        True apenas se ambos forem não vazios e idênticos
    """
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
