"""Protocolos e contratos do core da aplicação."""

from .authorization_store import DEFAULT_LIST_LIMIT, AuthorizationStoreProtocol
from .message_dispatcher import DispatchResult, MessageDispatcherProtocol
from .models import InboundTextMessage
from .normalizer import InboundNormalizerProtocol

__all__ = [
    "DEFAULT_LIST_LIMIT",
    "AuthorizationStoreProtocol",
    "DispatchResult",
    "InboundNormalizerProtocol",
    "InboundTextMessage",
    "MessageDispatcherProtocol",
]
