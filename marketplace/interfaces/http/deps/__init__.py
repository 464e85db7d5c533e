"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .account import get_account_service
from .message import get_message_service
from .payment import get_payment_admin_service, get_payment_gateway, get_settlement_coordinator
from .product import get_product_lookup, get_product_service

__all__ = [
    "get_db_session",
    "get_account_service",
    "get_message_service",
    "get_product_lookup",
    "get_product_service",
    "get_payment_gateway",
    "get_settlement_coordinator",
    "get_payment_admin_service",
]
