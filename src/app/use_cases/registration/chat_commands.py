"""Comandos de chat do bot (/start, /add, /del, /list).

/add, /del e /list só valem para remetentes configurados como admin;
para os demais o comando não é tratado e o texto segue o fluxo normal
de cadastro. /start só responde quando há texto de boas-vindas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.outcomes import Failure
from app.use_cases.registration.process_inbound_contact import (
    InboundOutcome,
    InboundProcessingResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols import MessageDispatcherProtocol
    from app.protocols.models import InboundTextMessage
    from app.use_cases.admin import WhitelistAdminUseCase

logger = logging.getLogger(__name__)

CHAT_LIST_LIMIT = 50

_ADMIN_COMMANDS = frozenset({"/add", "/del", "/list"})
_STORE_ERROR_REPLY = "Não foi possível concluir agora. Tente novamente."


def parse_command(text: str) -> tuple[str, str] | None:
    """Separa comando e argumento. Remove sufixo @nome_do_bot.

    Exemplo:
        parse_command("/add@meu_bot 11 9999-8888") == ("/add", "11 9999-8888")
    """
    stripped = text.strip()
    if not stripped.startswith("/"):
        return None
    head, _, rest = stripped.partition(" ")
    command = head.split("@", 1)[0].lower()
    return command, rest.strip()


class ChatCommandHandler:
    """Trata comandos de chat; retorna None quando o texto não é comando tratável."""

    def __init__(
        self,
        *,
        whitelist_admin: WhitelistAdminUseCase,
        dispatcher: MessageDispatcherProtocol,
        admin_sender_ids: Iterable[int] = (),
        welcome_text: str = "",
    ) -> None:
        self._whitelist_admin = whitelist_admin
        self._dispatcher = dispatcher
        self._admin_sender_ids = frozenset(admin_sender_ids)
        self._welcome_text = welcome_text

    async def handle(self, message: InboundTextMessage) -> InboundProcessingResult | None:
        parsed = parse_command(message.text)
        if parsed is None:
            return None
        command, argument = parsed

        if command == "/start":
            if not self._welcome_text:
                return None
            return await self._reply(message, self._welcome_text)

        if command not in _ADMIN_COMMANDS or not self._is_admin(message):
            return None

        logger.info("chat_admin_command", extra={"command": command})
        if command == "/list":
            return await self._reply(message, await self._list_reply())
        if command == "/add":
            return await self._reply(message, await self._add_reply(argument))
        return await self._reply(message, await self._remove_reply(argument))

    def _is_admin(self, message: InboundTextMessage) -> bool:
        return message.sender_id is not None and message.sender_id in self._admin_sender_ids

    async def _add_reply(self, argument: str) -> str:
        result = await self._whitelist_admin.add_number(argument)
        if isinstance(result, Failure):
            return _failure_reply(result, "/add")
        return f"Número adicionado ✅\n{result.value.phone}"

    async def _remove_reply(self, argument: str) -> str:
        result = await self._whitelist_admin.remove_number(argument)
        if isinstance(result, Failure):
            return _failure_reply(result, "/del")
        return f"Número removido ✅\n{result.value}"

    async def _list_reply(self) -> str:
        result = await self._whitelist_admin.list_numbers(CHAT_LIST_LIMIT)
        if isinstance(result, Failure):
            return _STORE_ERROR_REPLY
        if not result.value:
            return "Nenhum número cadastrado."
        lines = "\n".join(f"- {entry.phone}" for entry in result.value)
        return f"Números (primeiros {CHAT_LIST_LIMIT}):\n{lines}"

    async def _reply(self, message: InboundTextMessage, text: str) -> InboundProcessingResult:
        dispatch = await self._dispatcher.send(message.chat_handle, text)
        return InboundProcessingResult(
            outcome=InboundOutcome.COMMAND,
            notified=dispatch.success,
        )


def _failure_reply(failure: Failure, command: str) -> str:
    if failure.is_expected:
        return f"Informe o número após o comando: {command} 5511999998888"
    return _STORE_ERROR_REPLY
