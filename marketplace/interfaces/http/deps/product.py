"""Product related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.repositories import SqlProductRepository
from marketplace.modules.products import ProductLookup, ProductService

from .database import get_db_session


def get_product_repository(db: AsyncSession = Depends(get_db_session)) -> SqlProductRepository:
    return SqlProductRepository(db)


def get_product_lookup(repository: SqlProductRepository = Depends(get_product_repository)) -> ProductLookup:
    return repository


def get_product_service(repository: SqlProductRepository = Depends(get_product_repository)) -> ProductService:
    return ProductService(repository)


__all__ = ["get_product_repository", "get_product_lookup", "get_product_service"]
