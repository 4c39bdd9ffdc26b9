"""Monetary helpers. All amounts are Decimal with two places, banker's rounding."""
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from app.exceptions import BadRequestError

CENT = Decimal("0.01")
# Numeric(20, 2) holds 18 integer digits.
MAX_AMOUNT = Decimal("1E+18")
AMOUNT_OUT_OF_RANGE = "Amount is out of range."


def as_money(value) -> Decimal:
    try:
        money = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise BadRequestError(AMOUNT_OUT_OF_RANGE) from None
    if not money.is_finite() or abs(money) >= MAX_AMOUNT:
        raise BadRequestError(AMOUNT_OUT_OF_RANGE)
    return money
