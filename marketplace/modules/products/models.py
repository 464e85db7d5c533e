"""Domain models for product listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class ProductReference:
    """Minimal projection of a listing used at settlement time."""

    id: str
    price: int
    owner_id: str

    def to_snapshot(self) -> dict[str, Any]:
        return {"id": self.id, "price": self.price, "owner_id": self.owner_id}


@dataclass(slots=True)
class Product:
    id: str
    owner_id: str
    title: str
    price: int
    description: Optional[str] = None
    category_id: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class ProductCreateInput:
    title: str
    price: int
    description: Optional[str] = None
    category_id: Optional[str] = None
    location: Optional[str] = None
