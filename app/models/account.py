from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _new_id() -> str:
    return uuid4().hex


class Account(Base):
    """Customer account. Only the balance is mutated by this service."""

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    account_number: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    balance: Mapped[Decimal] = mapped_column(Numeric(20, 2), nullable=False, default=Decimal("0.00"))
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)

    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
    )

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, account_number={self.account_number!r}, balance={self.balance})"
