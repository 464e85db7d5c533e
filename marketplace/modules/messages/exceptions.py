"""Messaging domain specific exceptions."""


class MessageError(Exception):
    """Base class for messaging errors."""


class NoMessagesError(MessageError):
    """Raised when the message store is empty."""
