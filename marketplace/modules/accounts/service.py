"""Domain services for account management."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.crypto import hash_password, verify_password
from marketplace.core.security import Identity

from .exceptions import AccountAlreadyExistsError, AccountNotFoundError, AccountPermissionError
from .models import Account, AccountCreateInput
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates sign-up, login and account lookups."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        from marketplace.infrastructure.database.repositories import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> Account:
        account = await self._repository.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return account

    async def list_accounts(self) -> Sequence[Account]:
        return await self._repository.list_accounts()

    async def authenticate(self, email: str, password: str) -> Account | None:
        account = await self._repository.get_by_email(email.lower())
        if account is None:
            return None
        if not verify_password(password, account.password_hash):
            return None
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        email = payload.email.lower()
        existing = await self._repository.get_by_email(email)
        if existing is not None:
            raise AccountAlreadyExistsError(f"Email already registered: {email}")

        return await self._repository.create_account(
            email=email,
            password_hash=hash_password(payload.password),
            full_names=payload.full_names,
            phone_no=payload.phone_no,
            location=payload.location,
            role=payload.role,
        )

    async def delete_account(self, account_id: str, caller: Identity) -> Account:
        """Remove an account; callers may delete only themselves unless they are admins."""
        account = await self.get_by_id(account_id)
        if account.id != caller.subject_id and not caller.is_admin():
            raise AccountPermissionError("You can only delete your own account")
        await self._repository.delete_account(account_id)
        logger.info("Account %s deleted by %s", account_id, caller.subject_id)
        return account
