"""SQLAlchemy implementation of the message repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import Message as MessageModel
from marketplace.modules.messages.models import Message


class SqlMessageRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_message(self, *, message: str, product_id: str, status: str) -> Message:
        model = MessageModel(message=message, product_id=product_id, status=status)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def list_messages(self) -> Sequence[Message]:
        stmt = select(MessageModel).order_by(desc(MessageModel.date_created))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: MessageModel) -> Message:
        return Message(
            id=str(model.id),
            message=model.message,
            product_id=model.product_id,
            status=model.status,
            date_created=model.date_created,
        )
