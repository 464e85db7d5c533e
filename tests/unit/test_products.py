"""Unit tests for product listing use cases and the SQL product repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from marketplace.core.security import Identity
from marketplace.infrastructure.database.base import Base
from marketplace.infrastructure.database import models
from marketplace.infrastructure.database.repositories import SqlProductRepository
from marketplace.modules.products import (
    Product,
    ProductCreateInput,
    ProductNotFoundError,
    ProductOwnershipError,
    ProductReference,
    ProductService,
)


class InMemoryProductRepository:
    def __init__(self):
        self.items: dict[str, Product] = {}

    async def get_reference(self, product_id):
        product = self.items.get(product_id)
        if product is None:
            return None
        return ProductReference(id=product.id, price=product.price, owner_id=product.owner_id)

    async def get_by_id(self, product_id):
        return self.items.get(product_id)

    async def list_products(self, owner_id=None):
        return [p for p in self.items.values() if owner_id is None or p.owner_id == owner_id]

    async def create_product(self, *, owner_id, title, price, description, category_id, location):
        product = Product(
            id=f"prod-{len(self.items) + 1}",
            owner_id=owner_id,
            title=title,
            price=price,
            description=description,
            category_id=category_id,
            location=location,
        )
        self.items[product.id] = product
        return product

    async def delete_product(self, product_id):
        self.items.pop(product_id, None)


@pytest.fixture
def seller():
    return Identity(subject_id="seller-1", role="user")


@pytest.fixture
def service():
    return ProductService(InMemoryProductRepository())


async def test_created_product_is_owned_by_caller(service, seller):
    product = await service.create_product(seller, ProductCreateInput(title="Red jacket", price=100))

    assert product.owner_id == "seller-1"
    assert await service.list_owned(seller) == [product]


async def test_owner_can_delete(service, seller):
    product = await service.create_product(seller, ProductCreateInput(title="Red jacket", price=100))

    await service.delete_product(product.id, seller)

    assert await service.list_products() == []


async def test_other_user_cannot_delete(service, seller, buyer):
    product = await service.create_product(seller, ProductCreateInput(title="Red jacket", price=100))

    with pytest.raises(ProductOwnershipError):
        await service.delete_product(product.id, buyer)


async def test_admin_can_delete_any_listing(service, seller, admin):
    product = await service.create_product(seller, ProductCreateInput(title="Red jacket", price=100))

    await service.delete_product(product.id, admin)

    assert await service.list_products() == []


async def test_delete_missing_product(service, seller):
    with pytest.raises(ProductNotFoundError):
        await service.delete_product("missing", seller)


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
        session.add(models.Account(id="seller-1", email="seller@example.com", password_hash="x", full_names="Seller"))
        await session.flush()
        yield session
    await engine.dispose()


async def test_sql_reference_projects_id_price_owner(session):
    repository = SqlProductRepository(session)
    product = await repository.create_product(
        owner_id="seller-1",
        title="Red jacket",
        price=100,
        description=None,
        category_id="5",
        location="Kigali",
    )

    reference = await repository.get_reference(product.id)

    assert reference == ProductReference(id=product.id, price=100, owner_id="seller-1")
    assert await repository.get_reference("missing") is None


async def test_sql_list_and_delete(session):
    repository = SqlProductRepository(session)
    product = await repository.create_product(
        owner_id="seller-1", title="Lamp", price=250, description=None, category_id=None, location=None
    )

    assert [p.id for p in await repository.list_products(owner_id="seller-1")] == [product.id]
    assert await repository.list_products(owner_id="someone-else") == []

    await repository.delete_product(product.id)

    assert await repository.get_by_id(product.id) is None
