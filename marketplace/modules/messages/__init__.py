"""Buyer/seller messaging exports."""

from .exceptions import MessageError, NoMessagesError
from .models import Message, MessageCreateInput
from .repository import MessageRepository
from .service import MessageService

__all__ = [
    "Message",
    "MessageCreateInput",
    "MessageRepository",
    "MessageService",
    "MessageError",
    "NoMessagesError",
]
