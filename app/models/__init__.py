from app.models.account import Account
from app.models.transaction import Transaction, TransactionType

__all__ = [
    "Account",
    "Transaction",
    "TransactionType",
]
