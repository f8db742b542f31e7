# app/api/v1/routes/records.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_auth
from app.core.database import get_async_session
from app.core.exceptions import NotFoundError, ReferentialError, ValidationError
from app.crud.category import get_category_by_id
from app.crud.currency import get_currency_by_id
from app.crud.record import create_record, delete_record, get_record_by_id, list_records
from app.crud.user import get_user_by_id
from app.schemas.record import RecordCreate, RecordDetail, RecordRead

router = APIRouter(prefix="/record", tags=["records"], dependencies=[Depends(require_auth)])

@router.post("", response_model=RecordRead, status_code=status.HTTP_201_CREATED)
async def create_record_endpoint(
    rec_in: RecordCreate,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Create an expense record.

    Without an explicit currencyId the user's default currency is used.
    """
    user = await get_user_by_id(rec_in.user_id, db)
    if not user:
        raise ReferentialError("User does not exist")

    category = await get_category_by_id(rec_in.category_id, db)
    if not category:
        raise ReferentialError("Category does not exist")

    if rec_in.currency_id is not None:
        currency = await get_currency_by_id(rec_in.currency_id, db)
        if not currency:
            raise ReferentialError("Currency does not exist")
        currency_id = currency.id
    elif user.default_currency_id is not None:
        currency_id = user.default_currency_id
    else:
        raise ValidationError("User has no default currency and no currencyId was provided")

    return await create_record(user.id, category.id, currency_id, rec_in.amount, db)

@router.get("", response_model=List[RecordDetail])
async def read_records(
    user_id: Optional[int] = Query(None),
    category_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_async_session),
):
    """List records matching every filter given; at least one filter is required"""
    if user_id is None and category_id is None:
        raise ValidationError("At least one of 'user_id' or 'category_id' query parameters is required")
    return await list_records(db, user_id=user_id, category_id=category_id)

@router.get("/{record_id}", response_model=RecordDetail)
async def read_record(
    record_id: int,
    db: AsyncSession = Depends(get_async_session),
):
    record = await get_record_by_id(record_id, db)
    if not record:
        raise NotFoundError("Record not found")
    return record

@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record_endpoint(
    record_id: int,
    db: AsyncSession = Depends(get_async_session),
):
    record = await get_record_by_id(record_id, db)
    if not record:
        raise NotFoundError("Record not found")
    await delete_record(record, db)
    return None
