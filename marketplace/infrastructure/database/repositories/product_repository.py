"""SQLAlchemy implementation of the product repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import Product as ProductModel
from marketplace.modules.products.models import Product, ProductReference


class SqlProductRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_reference(self, product_id: str) -> ProductReference | None:
        stmt = select(ProductModel.id, ProductModel.price, ProductModel.owner_id).where(
            ProductModel.id == product_id
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return ProductReference(id=str(row.id), price=int(row.price), owner_id=str(row.owner_id))

    async def get_by_id(self, product_id: str) -> Product | None:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def list_products(self, owner_id: str | None = None) -> Sequence[Product]:
        stmt = select(ProductModel)
        if owner_id is not None:
            stmt = stmt.where(ProductModel.owner_id == owner_id)
        stmt = stmt.order_by(desc(ProductModel.created_at))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_product(
        self,
        *,
        owner_id: str,
        title: str,
        price: int,
        description: str | None,
        category_id: str | None,
        location: str | None,
    ) -> Product:
        model = ProductModel(
            owner_id=owner_id,
            title=title,
            price=price,
            description=description,
            category_id=category_id,
            location=location,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def delete_product(self, product_id: str) -> None:
        await self.session.execute(delete(ProductModel).where(ProductModel.id == product_id))

    @staticmethod
    def _to_domain(model: ProductModel) -> Product:
        return Product(
            id=str(model.id),
            owner_id=str(model.owner_id),
            title=model.title,
            price=int(model.price),
            description=model.description,
            category_id=model.category_id,
            location=model.location,
            created_at=model.created_at,
        )
