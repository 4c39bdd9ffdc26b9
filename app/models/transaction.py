from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class TransactionType(str, enum.Enum):
    ATM_DEPOSIT = "ATM_DEPOSIT"
    ATM_WITHDRAWAL = "ATM_WITHDRAWAL"


def _new_id() -> str:
    return uuid4().hex


class Transaction(Base):
    """A posted money movement. Rows are written once and never updated."""

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    amount: Mapped[Decimal] = mapped_column(Numeric(20, 2), nullable=False)
    fee: Mapped[Decimal] = mapped_column(Numeric(20, 2), nullable=False)
    net_amount: Mapped[Decimal] = mapped_column(Numeric(20, 2), nullable=False)
    type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=datetime.now)
    account_id: Mapped[str] = mapped_column(
        ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False
    )

    __table_args__ = (
        Index("ix_transactions_account_date", "account_id", "date"),
    )

    def __repr__(self) -> str:
        return f"Transaction(id={self.id!r}, type={self.type.value}, amount={self.amount}, account_id={self.account_id!r})"
