from app.repositories.account import AccountRepository, account_repo
from app.repositories.transaction import TransactionRepository, transaction_repo

__all__ = [
    "AccountRepository",
    "TransactionRepository",
    "account_repo",
    "transaction_repo",
]
