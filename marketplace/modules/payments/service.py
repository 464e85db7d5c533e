"""Purchase settlement and provider administration use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from marketplace.core.security import Identity, PreconditionFailedError, require_admin
from marketplace.modules.products.exceptions import ProductNotFoundError
from marketplace.modules.products.repository import ProductLookup

from .gateway import PaymentGateway
from .locks import KeyedLock
from .models import CashInRequest, CashOutRequest, ProviderResponse, PurchaseReceipt

logger = logging.getLogger(__name__)

SUBMITTED = "submitted"


@dataclass(slots=True)
class SettlementCoordinator:
    """Turns an authenticated purchase into a cash-in request.

    The amount always comes from the stored listing price. Nothing is
    persisted here; the provider confirms the payment out of band and
    remains the system of record for its outcome.
    """

    products: ProductLookup
    gateway: PaymentGateway
    environment: str
    locks: KeyedLock = field(default_factory=KeyedLock)

    async def initiate_purchase(
        self,
        product_id: str,
        payer_phone: str,
        identity: Optional[Identity],
    ) -> PurchaseReceipt:
        if identity is None:
            raise PreconditionFailedError("Purchase requires a verified identity")

        async with self.locks.hold(product_id):
            product = await self.products.get_reference(product_id)
            if product is None:
                raise ProductNotFoundError(f"product with id: {product_id} not found.")

            request = CashInRequest(number=payer_phone, amount=product.price, environment=self.environment)
            logger.info(
                "Submitting cash-in for product %s by %s (amount=%s, env=%s)",
                product.id,
                identity.subject_id,
                request.amount,
                request.environment,
            )
            response = await self.gateway.cash_in(request.number, request.amount, request.environment)

        return PurchaseReceipt(status=SUBMITTED, data=response.data, product=product)


@dataclass(slots=True)
class PaymentAdminService:
    """Provider introspection and withdrawals, restricted to admins."""

    gateway: PaymentGateway
    environment: str
    page_limit: int = 100

    async def withdraw(self, number: str, amount: int, admin: Optional[Identity]) -> ProviderResponse:
        require_admin(admin)
        request = CashOutRequest(number=number, amount=amount, environment=self.environment)
        logger.info("Submitting cash-out by %s (amount=%s, env=%s)", admin.subject_id, amount, self.environment)
        return await self.gateway.cash_out(request.number, request.amount, request.environment)

    async def transactions(
        self,
        admin: Optional[Identity],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> ProviderResponse:
        require_admin(admin)
        return await self.gateway.list_transactions(offset, limit or self.page_limit)

    async def events(
        self,
        admin: Optional[Identity],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> ProviderResponse:
        require_admin(admin)
        return await self.gateway.list_events(offset, limit or self.page_limit)

    async def account(self, admin: Optional[Identity]) -> ProviderResponse:
        require_admin(admin)
        return await self.gateway.account_info()
