from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas import ErrorResponse, TransactionRequest, TransactionResponse
from app.services.transaction import transaction_service

router = APIRouter()


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a transaction",
    description="Apply an ATM deposit or withdrawal to an account, charging the fee for its type.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def post_transaction(
    body: TransactionRequest,
    db: AsyncSession = Depends(get_db),
):
    return await transaction_service.post(db, body)


@router.get(
    "/accounts/{account_number}",
    response_model=list[TransactionResponse],
    summary="List account transactions",
    description="All transactions recorded against an account number, oldest first.",
    responses={404: {"model": ErrorResponse}},
)
async def list_transactions(
    account_number: str = Path(..., description="External account number"),
    db: AsyncSession = Depends(get_db),
):
    return [
        transaction
        async for transaction in transaction_service.list_by_account_number(db, account_number)
    ]
