"""Domain modules and shared exports."""

from . import accounts, messages, payments, products

__all__ = [
    "accounts",
    "messages",
    "payments",
    "products",
]
