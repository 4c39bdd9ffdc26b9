"""
Pricing strategies: one policy per transaction type, answering the fee for an
operation and the account balance after it. Strategies hold no mutable state
and are shared by all requests.
"""
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType

from app.config import Settings, settings
from app.exceptions import BadRequestError
from app.models import TransactionType
from app.money import as_money

INSUFFICIENT_BALANCE = "Insufficient balance for this transaction."
NON_POSITIVE_AMOUNT = "Transaction amount must be greater than zero."


class TransactionStrategy(ABC):
    transaction_type: TransactionType

    def __init__(self, fee: Decimal) -> None:
        self._fee = as_money(fee)

    def fee(self) -> Decimal:
        return self._fee

    def apply(self, balance: Decimal, amount: Decimal) -> Decimal:
        """Return the balance after the operation, or raise BadRequestError."""
        amount = as_money(amount)
        if amount <= 0:
            raise BadRequestError(NON_POSITIVE_AMOUNT)
        new_balance = as_money(self._new_balance(as_money(balance), amount))
        if new_balance < 0:
            raise BadRequestError(INSUFFICIENT_BALANCE)
        return new_balance

    @abstractmethod
    def _new_balance(self, balance: Decimal, amount: Decimal) -> Decimal:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fee={self._fee})"


class ATMDepositStrategy(TransactionStrategy):
    """Credit the amount; the fee comes out of the deposit."""

    transaction_type = TransactionType.ATM_DEPOSIT

    def _new_balance(self, balance: Decimal, amount: Decimal) -> Decimal:
        return balance + amount - self._fee


class ATMWithdrawalStrategy(TransactionStrategy):
    """Debit the amount plus the fee."""

    transaction_type = TransactionType.ATM_WITHDRAWAL

    def _new_balance(self, balance: Decimal, amount: Decimal) -> Decimal:
        return balance - (amount + self._fee)


class StrategyRegistry:
    """Read-only lookup of the strategy registered for each transaction type."""

    def __init__(self, strategies: Iterable[TransactionStrategy]) -> None:
        by_type: dict[TransactionType, TransactionStrategy] = {}
        for strategy in strategies:
            if strategy.transaction_type in by_type:
                raise ValueError(f"Duplicate strategy for {strategy.transaction_type.value}")
            by_type[strategy.transaction_type] = strategy
        self._strategies: Mapping[TransactionType, TransactionStrategy] = MappingProxyType(by_type)

    def get(self, transaction_type: TransactionType | str) -> TransactionStrategy:
        try:
            return self._strategies[TransactionType(transaction_type)]
        except (KeyError, ValueError):
            value = getattr(transaction_type, "value", transaction_type)
            raise BadRequestError(f"Unsupported transaction type: {value}") from None


def build_registry(config: Settings = settings) -> StrategyRegistry:
    return StrategyRegistry(
        [
            ATMDepositStrategy(config.atm_deposit_fee),
            ATMWithdrawalStrategy(config.atm_withdrawal_fee),
        ]
    )


strategy_registry = build_registry()
