from app.schemas.transaction import (
    AccountResponse,
    ErrorResponse,
    TransactionRequest,
    TransactionResponse,
)

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "TransactionRequest",
    "TransactionResponse",
]
