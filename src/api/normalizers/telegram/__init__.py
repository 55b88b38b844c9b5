"""Normalizer Telegram: extração de mensagens de texto do webhook."""

from .extractor import extract_inbound_message

__all__ = ["extract_inbound_message"]
