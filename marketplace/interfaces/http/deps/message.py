"""Message related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.modules.messages import MessageService

from .database import get_db_session


def get_message_service(db: AsyncSession = Depends(get_db_session)) -> MessageService:
    return MessageService.with_session(db)


__all__ = ["get_message_service"]
