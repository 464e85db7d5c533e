"""Payment related dependency providers."""

from fastapi import Depends

from marketplace.core.container import ApplicationContainer, get_container
from marketplace.modules.payments import PaymentAdminService, PaymentGateway, SettlementCoordinator
from marketplace.modules.products import ProductLookup

from .product import get_product_lookup


def get_payment_gateway(container: ApplicationContainer = Depends(get_container)) -> PaymentGateway:
    return container.payment_gateway


def get_settlement_coordinator(
    products: ProductLookup = Depends(get_product_lookup),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    container: ApplicationContainer = Depends(get_container),
) -> SettlementCoordinator:
    return SettlementCoordinator(
        products=products,
        gateway=gateway,
        environment=container.settings.paypack.environment,
        locks=container.purchase_locks,
    )


def get_payment_admin_service(
    gateway: PaymentGateway = Depends(get_payment_gateway),
    container: ApplicationContainer = Depends(get_container),
) -> PaymentAdminService:
    paypack = container.settings.paypack
    return PaymentAdminService(gateway=gateway, environment=paypack.environment, page_limit=paypack.page_limit)


__all__ = ["get_payment_gateway", "get_settlement_coordinator", "get_payment_admin_service"]
