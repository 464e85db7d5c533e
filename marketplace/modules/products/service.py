"""Product listing use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from marketplace.core.security import Identity

from .exceptions import ProductNotFoundError, ProductOwnershipError
from .models import Product, ProductCreateInput
from .repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProductService:
    repository: ProductRepository

    async def create_product(self, owner: Identity, payload: ProductCreateInput) -> Product:
        product = await self.repository.create_product(
            owner_id=owner.subject_id,
            title=payload.title,
            price=payload.price,
            description=payload.description,
            category_id=payload.category_id,
            location=payload.location,
        )
        logger.info("Product %s listed by %s", product.id, owner.subject_id)
        return product

    async def list_products(self) -> Sequence[Product]:
        return await self.repository.list_products()

    async def list_owned(self, owner: Identity) -> Sequence[Product]:
        return await self.repository.list_products(owner_id=owner.subject_id)

    async def delete_product(self, product_id: str, caller: Identity) -> Product:
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"product with id: {product_id} not found.")
        if product.owner_id != caller.subject_id and not caller.is_admin():
            raise ProductOwnershipError("Only the owner can delete this product")
        await self.repository.delete_product(product_id)
        logger.info("Product %s deleted by %s", product_id, caller.subject_id)
        return product
