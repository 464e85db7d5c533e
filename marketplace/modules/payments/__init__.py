"""Payment settlement exports."""

from .exceptions import (
    GatewayError,
    GatewayRejectedError,
    GatewayUnavailableError,
    PaymentError,
)
from .gateway import PaymentGateway
from .locks import KeyedLock
from .models import CashInRequest, CashOutRequest, ProviderResponse, PurchaseReceipt
from .service import PaymentAdminService, SettlementCoordinator

__all__ = [
    "CashInRequest",
    "CashOutRequest",
    "ProviderResponse",
    "PurchaseReceipt",
    "PaymentGateway",
    "KeyedLock",
    "SettlementCoordinator",
    "PaymentAdminService",
    "PaymentError",
    "GatewayError",
    "GatewayRejectedError",
    "GatewayUnavailableError",
]
