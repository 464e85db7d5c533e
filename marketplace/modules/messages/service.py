"""Messaging use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import NoMessagesError
from .models import STATUS_NOT_REPLIED, Message, MessageCreateInput
from .repository import MessageRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MessageService:
    repository: MessageRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "MessageService":
        from marketplace.infrastructure.database.repositories import SqlMessageRepository

        return cls(SqlMessageRepository(session))

    async def send_message(self, payload: MessageCreateInput) -> Message:
        message = await self.repository.create_message(
            message=payload.message,
            product_id=payload.product_id,
            status=STATUS_NOT_REPLIED,
        )
        logger.info("Message %s sent about product %s", message.id, message.product_id)
        return message

    async def list_messages(self) -> Sequence[Message]:
        messages = await self.repository.list_messages()
        if not messages:
            raise NoMessagesError("There's no any message registered")
        return messages
