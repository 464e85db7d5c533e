"""Domain models for payment settlement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marketplace.modules.products.models import ProductReference


@dataclass(frozen=True, slots=True)
class CashInRequest:
    number: str
    amount: int
    environment: str


@dataclass(frozen=True, slots=True)
class CashOutRequest:
    number: str
    amount: int
    environment: str


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    data: Any


@dataclass(frozen=True, slots=True)
class PurchaseReceipt:
    status: str
    data: Any
    product: ProductReference

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data, "product": self.product.to_snapshot()}
