"""Repository protocols for product listings."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Product, ProductReference


class ProductLookup(Protocol):
    """Read-only view consumed by the settlement flow."""

    async def get_reference(self, product_id: str) -> ProductReference | None:
        ...


class ProductRepository(ProductLookup, Protocol):
    async def get_by_id(self, product_id: str) -> Product | None:
        ...

    async def list_products(self, owner_id: str | None = None) -> Sequence[Product]:
        ...

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
        ...

    async def delete_product(self, product_id: str) -> None:
        ...
