"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (envio e webhook)
"""

__all__: list[str] = []
