"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .message_repository import SqlMessageRepository
from .product_repository import SqlProductRepository

__all__ = [
    "SqlAccountRepository",
    "SqlMessageRepository",
    "SqlProductRepository",
]
