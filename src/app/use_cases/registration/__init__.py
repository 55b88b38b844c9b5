"""Use cases do fluxo de cadastro pelo bot."""

from app.use_cases.registration.chat_commands import ChatCommandHandler, parse_command
from app.use_cases.registration.process_inbound_contact import (
    InboundOutcome,
    InboundProcessingResult,
    ProcessInboundContactUseCase,
)

__all__ = [
    "ChatCommandHandler",
    "InboundOutcome",
    "InboundProcessingResult",
    "ProcessInboundContactUseCase",
    "parse_command",
]
