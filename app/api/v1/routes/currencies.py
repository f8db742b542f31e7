# app/api/v1/routes/currencies.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_auth
from app.core.database import get_async_session
from app.core.exceptions import NotFoundError
from app.crud.currency import create_currency, delete_currency, get_currency_by_id, list_currencies
from app.schemas.currency import CurrencyCreate, CurrencyRead

router = APIRouter(prefix="/currency", tags=["currencies"], dependencies=[Depends(require_auth)])

@router.get("", response_model=List[CurrencyRead])
async def read_currencies(db: AsyncSession = Depends(get_async_session)):
    return await list_currencies(db)

@router.post("", response_model=CurrencyRead, status_code=status.HTTP_201_CREATED)
async def create_currency_endpoint(
    cur_in: CurrencyCreate,
    db: AsyncSession = Depends(get_async_session),
):
    return await create_currency(cur_in, db)

@router.delete("/{currency_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_currency_endpoint(
    currency_id: int,
    db: AsyncSession = Depends(get_async_session),
):
    """Delete a currency; refused while records still use it"""
    currency = await get_currency_by_id(currency_id, db)
    if not currency:
        raise NotFoundError("Currency not found")
    await delete_currency(currency, db)
    return None
