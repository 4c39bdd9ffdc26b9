from collections.abc import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Transaction


class TransactionRepository:
    async def save(self, db: AsyncSession, transaction: Transaction) -> Transaction:
        """Insert a new transaction; the id is assigned on flush."""
        db.add(transaction)
        await db.flush()
        return transaction

    async def find_all_by_account_id(
        self,
        db: AsyncSession,
        account_id: str,
    ) -> AsyncIterator[Transaction]:
        """Stream an account's transactions, oldest first."""
        result = await db.stream_scalars(
            select(Transaction)
            .where(Transaction.account_id == account_id)
            .order_by(Transaction.date, Transaction.id)
        )
        async for transaction in result:
            yield transaction


transaction_repo = TransactionRepository()
