"""Tests for pricing strategies and the strategy registry."""
from decimal import Decimal

import pytest

from app.config import Settings
from app.exceptions import BadRequestError
from app.models import TransactionType
from app.services.strategy import (
    ATMDepositStrategy,
    ATMWithdrawalStrategy,
    StrategyRegistry,
    build_registry,
)


class TestATMDepositStrategy:
    def test_fee(self) -> None:
        assert ATMDepositStrategy(Decimal("2.0")).fee() == Decimal("2.00")

    def test_balance_is_credited_net_of_fee(self) -> None:
        strategy = ATMDepositStrategy(Decimal("2.0"))
        assert strategy.apply(Decimal("500.0"), Decimal("100.0")) == Decimal("598.00")

    def test_rejects_non_positive_amount(self) -> None:
        strategy = ATMDepositStrategy(Decimal("2.0"))
        with pytest.raises(BadRequestError, match="greater than zero"):
            strategy.apply(Decimal("500"), Decimal("0"))
        with pytest.raises(BadRequestError):
            strategy.apply(Decimal("500"), Decimal("-5"))

    def test_rejects_deposit_smaller_than_fee_on_empty_account(self) -> None:
        strategy = ATMDepositStrategy(Decimal("2.0"))
        with pytest.raises(BadRequestError, match="Insufficient balance"):
            strategy.apply(Decimal("0"), Decimal("1"))

    def test_rounds_half_even_to_cents(self) -> None:
        strategy = ATMDepositStrategy(Decimal("0"))
        assert strategy.apply(Decimal("0"), Decimal("0.125")) == Decimal("0.12")

    def test_rejects_amount_beyond_precision(self) -> None:
        strategy = ATMDepositStrategy(Decimal("2"))
        with pytest.raises(BadRequestError, match="out of range"):
            strategy.apply(Decimal("0"), Decimal("1E+30"))

    def test_rejects_amount_too_large_to_store(self) -> None:
        strategy = ATMDepositStrategy(Decimal("2"))
        with pytest.raises(BadRequestError, match="out of range"):
            strategy.apply(Decimal("0"), Decimal("1E+18"))

    def test_rejects_balance_too_large_to_store(self) -> None:
        strategy = ATMDepositStrategy(Decimal("0"))
        with pytest.raises(BadRequestError, match="out of range"):
            strategy.apply(Decimal("999999999999999999"), Decimal("5"))


class TestATMWithdrawalStrategy:
    def test_fee(self) -> None:
        assert ATMWithdrawalStrategy(Decimal("1.0")).fee() == Decimal("1.00")

    def test_balance_is_debited_amount_plus_fee(self) -> None:
        strategy = ATMWithdrawalStrategy(Decimal("1.0"))
        assert strategy.apply(Decimal("500.0"), Decimal("50.0")) == Decimal("449.00")

    def test_can_empty_the_account(self) -> None:
        strategy = ATMWithdrawalStrategy(Decimal("1.0"))
        assert strategy.apply(Decimal("51"), Decimal("50")) == Decimal("0.00")

    def test_insufficient_balance(self) -> None:
        strategy = ATMWithdrawalStrategy(Decimal("1.0"))
        with pytest.raises(BadRequestError) as exc_info:
            strategy.apply(Decimal("500.0"), Decimal("600.0"))
        assert exc_info.value.message == "Insufficient balance for this transaction."

    def test_fee_alone_can_overdraw(self) -> None:
        strategy = ATMWithdrawalStrategy(Decimal("1.0"))
        with pytest.raises(BadRequestError):
            strategy.apply(Decimal("50"), Decimal("50"))


class TestStrategyRegistry:
    def test_get_by_enum_and_value(self) -> None:
        registry = build_registry(Settings())
        assert isinstance(registry.get(TransactionType.ATM_DEPOSIT), ATMDepositStrategy)
        assert isinstance(registry.get("ATM_WITHDRAWAL"), ATMWithdrawalStrategy)

    def test_fees_come_from_settings(self) -> None:
        registry = build_registry(
            Settings(atm_deposit_fee=Decimal("0.50"), atm_withdrawal_fee=Decimal("3"))
        )
        assert registry.get(TransactionType.ATM_DEPOSIT).fee() == Decimal("0.50")
        assert registry.get(TransactionType.ATM_WITHDRAWAL).fee() == Decimal("3.00")

    def test_unknown_type_is_bad_request(self) -> None:
        registry = build_registry(Settings())
        with pytest.raises(BadRequestError, match="Unsupported transaction type: WIRE"):
            registry.get("WIRE")

    def test_unregistered_type_is_bad_request(self) -> None:
        registry = StrategyRegistry([ATMDepositStrategy(Decimal("2"))])
        with pytest.raises(BadRequestError, match="ATM_WITHDRAWAL"):
            registry.get(TransactionType.ATM_WITHDRAWAL)

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError):
            StrategyRegistry([ATMDepositStrategy(Decimal("2")), ATMDepositStrategy(Decimal("3"))])

