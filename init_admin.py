"""
Create the default admin account used for first login.
"""
import asyncio
import os

from sqlalchemy import select

from marketplace.infrastructure.database import get_session, init_db
from marketplace.infrastructure.database.models import Account
from marketplace.modules.accounts import AccountCreateInput, AccountService


async def create_default_admin():
    await init_db()

    async for db in get_session():
        stmt = select(Account).where(Account.role == "admin").limit(1)
        result = await db.execute(stmt)
        if result.scalar_one_or_none():
            print("An admin account already exists, nothing to do")
            return

        email = os.environ.get("ADMIN_EMAIL", "admin@example.com")
        password = os.environ.get("ADMIN_PASSWORD", "admin123")
        service = AccountService.with_session(db)
        await service.create_account(
            AccountCreateInput(
                email=email,
                password=password,
                full_names="Administrator",
                role="admin",
            )
        )

        print("=" * 50)
        print("Default admin account created")
        print(f"Email: {email}")
        print("Change the password after the first login!")
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(create_default_admin())
