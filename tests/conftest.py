"""Shared fixtures: in-memory collaborators and an API client factory."""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from marketplace.core.config import PaypackSettings, Settings
from marketplace.core.container import ApplicationContainer
from marketplace.core.security import Identity, create_access_token
from marketplace.interfaces.http.deps import get_product_lookup
from marketplace.main import create_app
from marketplace.modules.payments import ProviderResponse
from marketplace.modules.products import ProductReference


class FakeGateway:
    """Records every provider call; optionally fails with ``error``."""

    def __init__(self, *, data: Any = None, error: Optional[Exception] = None) -> None:
        self.data = data if data is not None else {"ref": "d0f7e1c2", "status": "pending", "kind": "CASHIN"}
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def calls_to(self, operation: str) -> list[dict[str, Any]]:
        return [args for name, args in self.calls if name == operation]

    async def _respond(self, operation: str, **args: Any) -> ProviderResponse:
        self.calls.append((operation, args))
        if self.error is not None:
            raise self.error
        return ProviderResponse(data=self.data)

    async def cash_in(self, number: str, amount: int, environment: str) -> ProviderResponse:
        return await self._respond("cash_in", number=number, amount=amount, environment=environment)

    async def cash_out(self, number: str, amount: int, environment: str) -> ProviderResponse:
        return await self._respond("cash_out", number=number, amount=amount, environment=environment)

    async def list_transactions(self, offset: int, limit: int) -> ProviderResponse:
        return await self._respond("list_transactions", offset=offset, limit=limit)

    async def list_events(self, offset: int, limit: int) -> ProviderResponse:
        return await self._respond("list_events", offset=offset, limit=limit)

    async def account_info(self) -> ProviderResponse:
        return await self._respond("account_info")

    async def aclose(self) -> None:
        return None


class SlowGateway(FakeGateway):
    """Holds each cash-in open briefly and tracks how many overlap."""

    def __init__(self, delay: float = 0.02) -> None:
        super().__init__()
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0

    async def cash_in(self, number: str, amount: int, environment: str) -> ProviderResponse:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            return await super().cash_in(number, amount, environment)
        finally:
            self.in_flight -= 1


class FakeProductLookup:
    def __init__(self, *products: ProductReference) -> None:
        self.products = {product.id: product for product in products}
        self.lookups: list[str] = []

    async def get_reference(self, product_id: str) -> ProductReference | None:
        self.lookups.append(product_id)
        return self.products.get(product_id)


@pytest.fixture
def product_p1() -> ProductReference:
    return ProductReference(id="P1", price=100, owner_id="seller-1")


@pytest.fixture
def product_lookup(product_p1) -> FakeProductLookup:
    return FakeProductLookup(product_p1)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def buyer() -> Identity:
    return Identity(subject_id="buyer-1", role="user")


@pytest.fixture
def admin() -> Identity:
    return Identity(subject_id="admin-1", role="admin")


@pytest.fixture
def user_headers(buyer) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(buyer.subject_id, buyer.role)}"}


@pytest.fixture
def admin_headers(admin) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(admin.subject_id, admin.role)}"}


@pytest.fixture
def make_api_client(gateway, product_lookup):
    """Build a TestClient wired to the fake gateway and product lookup."""

    def _make(*, admin_routes_enabled: bool = False) -> TestClient:
        settings = Settings(
            api_prefix="/AguraMarket",
            paypack=PaypackSettings(environment="production", admin_routes_enabled=admin_routes_enabled),
        )
        container = ApplicationContainer(settings=settings, payment_gateway=gateway)
        app = create_app(settings, container=container)
        app.dependency_overrides[get_product_lookup] = lambda: product_lookup
        return TestClient(app, raise_server_exceptions=False)

    return _make
