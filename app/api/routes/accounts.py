from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas import AccountResponse, ErrorResponse
from app.services.transaction import transaction_service

router = APIRouter()


@router.get(
    "/{account_number}",
    response_model=AccountResponse,
    summary="Get account",
    description="Current balance of an account by its external account number.",
    responses={404: {"model": ErrorResponse}},
)
async def get_account(
    account_number: str = Path(..., description="External account number"),
    db: AsyncSession = Depends(get_db),
):
    return await transaction_service.get_account(db, account_number)
