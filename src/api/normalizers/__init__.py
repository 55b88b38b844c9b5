"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- telegram/: extractor da Telegram Bot API
"""

from .telegram import extract_inbound_message

__all__ = ["extract_inbound_message"]
