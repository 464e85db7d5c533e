"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Account:
    id: str
    email: str
    full_names: str
    role: str
    password_hash: str = field(repr=False)
    phone_no: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_admin(self) -> bool:
        return self.role == "admin"


@dataclass(slots=True)
class AccountCreateInput:
    email: str
    password: str
    full_names: str
    phone_no: Optional[str] = None
    location: Optional[str] = None
    role: str = "user"
