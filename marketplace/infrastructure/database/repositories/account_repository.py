"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import Account as AccountModel
from marketplace.modules.accounts.models import Account


class SqlAccountRepository:
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_accounts(self) -> Sequence[Account]:
        stmt = select(AccountModel).order_by(AccountModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

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
        model = AccountModel(
            email=email,
            password_hash=password_hash,
            full_names=full_names,
            phone_no=phone_no,
            location=location,
            role=role,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete_account(self, account_id: str) -> None:
        await self._session.execute(delete(AccountModel).where(AccountModel.id == account_id))

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            email=model.email,
            full_names=model.full_names,
            role=model.role or "user",
            password_hash=model.password_hash,
            phone_no=model.phone_no,
            location=model.location,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
