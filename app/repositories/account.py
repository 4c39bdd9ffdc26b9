from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Account


class AccountRepository:
    async def find_by_account_number(
        self,
        db: AsyncSession,
        account_number: str,
        for_update: bool = False,
    ) -> Account | None:
        """Look up by the external account number. for_update takes a row lock until commit."""
        stmt = select(Account).where(Account.account_number == account_number)
        if for_update:
            stmt = stmt.with_for_update()
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, db: AsyncSession, account: Account) -> Account:
        db.add(account)
        await db.flush()
        return account


account_repo = AccountRepository()
