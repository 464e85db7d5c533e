"""HTTP interface: routers and dependency providers."""

from fastapi import APIRouter

from marketplace.interfaces.http.routers import payments, products, users


def create_api_router(prefix: str = "", *, include_payment_admin: bool = False) -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["Users"])
    router.include_router(products.router, prefix="/products", tags=["Products"])
    router.include_router(payments.router, prefix="/momo", tags=["Payment"])
    if include_payment_admin:
        router.include_router(payments.admin_router, prefix="/momo", tags=["Payment administration"])
    return router


__all__ = [
    "create_api_router",
]
