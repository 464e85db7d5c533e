"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: str) -> Account | None:
        ...

    async def get_by_email(self, email: str) -> Account | None:
        ...

    async def list_accounts(self) -> Sequence[Account]:
        ...

    async def create_account(
        self,
        *,
        email: str,
        password_hash: str,
        full_names: str,
        phone_no: str | None,
        location: str | None,
        role: str,
    ) -> Account:
        ...

    async def delete_account(self, account_id: str) -> None:
        ...
