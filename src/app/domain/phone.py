"""Normalização de telefone: chave canônica de whitelist e vínculos.

Números chegam por dois caminhos (formulário admin e texto livre no bot)
com formatos heterogêneos. Toda leitura e escrita no store usa a chave
canônica: apenas dígitos decimais.
"""

from __future__ import annotations

# Abaixo disso o texto inbound é tratado como conversa, não como telefone
MIN_INBOUND_PHONE_DIGITS = 7


def normalize_phone(raw: object) -> str:
    """Remove todo caractere que não seja dígito decimal (0-9).

    Função total: nunca levanta. Retorna string vazia quando não sobra
    dígito; o chamador deve rejeitar vazio antes de acessar o store.

    Exemplo:
        normalize_phone("+1 (234) 567-8900") == "12345678900"
    """
    if raw is None:
        return ""
    return "".join(ch for ch in str(raw) if ch in "0123456789")


def looks_like_phone(key: str) -> bool:
    """Heurística do caminho inbound: chave com pelo menos 7 dígitos."""
    return len(key) >= MIN_INBOUND_PHONE_DIGITS
