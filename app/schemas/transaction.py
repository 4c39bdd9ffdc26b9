from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from app.models import TransactionType
from app.money import MAX_AMOUNT

# Decimal internally, a JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionRequest(CamelModel):
    amount: Money = Field(..., gt=0, lt=MAX_AMOUNT, description="Gross amount of the operation")
    type: TransactionType = Field(..., description="Transaction type, e.g. ATM_DEPOSIT")
    account_number: str = Field(..., min_length=1, description="External account number")


class TransactionResponse(CamelModel):
    id: str
    amount: Money
    fee: Money
    net_amount: Money
    type: TransactionType
    date: datetime
    account_id: str


class AccountResponse(CamelModel):
    id: str
    account_number: str
    balance: Money
    user_id: str


class ErrorResponse(BaseModel):
    kind: Literal["NotFound", "BadRequest"]
    message: str
