"""Repository protocol for messages."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Message


class MessageRepository(Protocol):
    async def create_message(self, *, message: str, product_id: str, status: str) -> Message:
        ...

    async def list_messages(self) -> Sequence[Message]:
        ...
