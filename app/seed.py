"""Demo accounts for local runs; real accounts come from the account-opening service."""
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Account

DEMO_ACCOUNTS = [
    # (account_number, balance, user_id)
    ("12345678", Decimal("500.00"), "demo-user-alice"),
    ("87654321", Decimal("0.00"), "demo-user-bob"),
]


async def run_seed(db: AsyncSession) -> str:
    """Insert the demo accounts that are missing. Idempotent. Returns status message."""
    created = []
    for account_number, balance, user_id in DEMO_ACCOUNTS:
        r = await db.execute(select(Account).where(Account.account_number == account_number))
        if r.scalar_one_or_none() is not None:
            continue
        db.add(Account(account_number=account_number, balance=balance, user_id=user_id))
        created.append(account_number)
    await db.flush()
    if not created:
        return "Already seeded"
    return "Seeded accounts: " + ", ".join(created)
