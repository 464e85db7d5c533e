"""Unit tests for buyer/seller messaging and the SQL message repository."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.infrastructure.database.base import Base
from marketplace.infrastructure.database.repositories import SqlMessageRepository
from marketplace.modules.messages import Message, MessageCreateInput, MessageService, NoMessagesError


class InMemoryMessageRepository:
    def __init__(self):
        self.items: list[Message] = []

    async def create_message(self, *, message, product_id, status):
        created = Message(
            id=f"msg-{len(self.items) + 1}",
            message=message,
            product_id=product_id,
            status=status,
            date_created=datetime.now(timezone.utc),
        )
        self.items.append(created)
        return created

    async def list_messages(self):
        return list(reversed(self.items))


@pytest.fixture
def repository():
    return InMemoryMessageRepository()


@pytest.fixture
def service(repository):
    return MessageService(repository)


# =============================================================================
# SERVICE
# =============================================================================


async def test_new_message_is_not_replied(service):
    message = await service.send_message(MessageCreateInput(message="Is it still available?", product_id="P1"))

    assert message.status == "not replied"
    assert message.product_id == "P1"


async def test_listing_returns_sent_messages(service):
    await service.send_message(MessageCreateInput(message="first", product_id="P1"))
    await service.send_message(MessageCreateInput(message="second", product_id="P2"))

    messages = await service.list_messages()

    assert [m.message for m in messages] == ["second", "first"]


async def test_empty_store_raises(service):
    with pytest.raises(NoMessagesError):
        await service.list_messages()


# =============================================================================
# SQL REPOSITORY
# =============================================================================


@pytest.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


async def test_sql_create_fills_id_and_date(session):
    repository = SqlMessageRepository(session)

    message = await repository.create_message(message="Hello", product_id="P1", status="not replied")

    assert message.id
    assert message.date_created is not None
    assert message.status == "not replied"


async def test_sql_list_messages(session):
    repository = SqlMessageRepository(session)
    assert await repository.list_messages() == []

    created = await repository.create_message(message="Hello", product_id="P1", status="not replied")

    assert [m.id for m in await repository.list_messages()] == [created.id]
