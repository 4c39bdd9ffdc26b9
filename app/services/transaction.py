"""
Transaction service: posts ATM deposits and withdrawals against an account
and lists the transactions recorded for it.

Every store write happens after the pricing strategy has accepted the
operation, so a refused operation leaves both stores untouched. The account
save and the transaction insert share the caller's session and are committed
together by it.
"""
import logging
from collections.abc import AsyncIterator
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import BadRequestError, NotFoundError
from app.models import Account, Transaction
from app.money import as_money
from app.repositories import (
    AccountRepository,
    TransactionRepository,
    account_repo,
    transaction_repo,
)
from app.schemas import AccountResponse, TransactionRequest, TransactionResponse
from app.services.strategy import StrategyRegistry, strategy_registry

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND = "Account not found"


class TransactionService:
    def __init__(
        self,
        account_repository: AccountRepository = account_repo,
        transaction_repository: TransactionRepository = transaction_repo,
        registry: StrategyRegistry = strategy_registry,
    ) -> None:
        self.account_repository = account_repository
        self.transaction_repository = transaction_repository
        self.registry = registry

    async def _get_account(
        self,
        db: AsyncSession,
        account_number: str,
        for_update: bool = False,
    ) -> Account:
        account = await self.account_repository.find_by_account_number(
            db, account_number, for_update=for_update
        )
        if account is None:
            logger.warning("account.not_found", extra={"account_number": account_number})
            raise NotFoundError(ACCOUNT_NOT_FOUND)
        return account

    @staticmethod
    def _to_response(transaction: Transaction) -> TransactionResponse:
        return TransactionResponse(
            id=transaction.id,
            amount=transaction.amount,
            fee=transaction.fee,
            net_amount=transaction.net_amount,
            type=transaction.type,
            date=transaction.date,
            account_id=transaction.account_id,
        )

    async def post(self, db: AsyncSession, request: TransactionRequest) -> TransactionResponse:
        """
        Price the operation with the strategy for request.type, update the
        account balance and record the transaction.
        Raises NotFoundError for an unknown account number and BadRequestError
        when the strategy refuses the operation.
        """
        date = datetime.now()
        account = await self._get_account(db, request.account_number, for_update=True)

        amount = as_money(request.amount)
        strategy = self.registry.get(request.type)
        fee = strategy.fee()
        try:
            new_balance = strategy.apply(account.balance, amount)
        except BadRequestError as exc:
            logger.info(
                "transaction.rejected",
                extra={
                    "account_id": account.id,
                    "type": getattr(request.type, "value", request.type),
                    "amount": str(amount),
                    "reason": exc.message,
                },
            )
            raise

        account.balance = new_balance
        await self.account_repository.save(db, account)

        transaction = Transaction(
            amount=amount,
            fee=fee,
            net_amount=amount - fee,
            type=request.type,
            date=date,
            account_id=account.id,
        )
        saved = await self.transaction_repository.save(db, transaction)
        logger.info(
            "transaction.posted",
            extra={
                "transaction_id": saved.id,
                "account_id": account.id,
                "type": saved.type.value,
                "amount": str(saved.amount),
                "fee": str(saved.fee),
                "balance": str(new_balance),
            },
        )
        return self._to_response(saved)

    async def list_by_account_number(
        self,
        db: AsyncSession,
        account_number: str,
    ) -> AsyncIterator[TransactionResponse]:
        """Yield the account's transactions. NotFoundError surfaces on first iteration."""
        account = await self._get_account(db, account_number)
        async for transaction in self.transaction_repository.find_all_by_account_id(db, account.id):
            yield self._to_response(transaction)

    async def get_account(self, db: AsyncSession, account_number: str) -> AccountResponse:
        account = await self._get_account(db, account_number)
        return AccountResponse(
            id=account.id,
            account_number=account.account_number,
            balance=account.balance,
            user_id=account.user_id,
        )


transaction_service = TransactionService()
