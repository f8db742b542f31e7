# app/api/v1/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_auth
from app.core.database import get_async_session
from app.core.exceptions import NotFoundError, ReferentialError
from app.crud.currency import get_currency_by_id
from app.crud.user import delete_user, get_user_by_id, list_users, set_default_currency
from app.schemas.user import UserCurrencyUpdate, UserRead

router = APIRouter(tags=["User Management"], dependencies=[Depends(require_auth)])

@router.get("/users", response_model=List[UserRead])
async def read_users(db: AsyncSession = Depends(get_async_session)):
    return await list_users(db)

@router.get("/user/{user_id}", response_model=UserRead)
async def read_user(
    user_id: int,
    db: AsyncSession = Depends(get_async_session),
):
    user = await get_user_by_id(user_id, db)
    if not user:
        raise NotFoundError("User not found")
    return user

@router.patch("/user/{user_id}/currency", response_model=UserRead)
async def update_default_currency(
    user_id: int,
    body: UserCurrencyUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    """Set the currency used for records created without one"""
    user = await get_user_by_id(user_id, db)
    if not user:
        raise NotFoundError("User not found")

    currency = await get_currency_by_id(body.currency_id, db)
    if not currency:
        raise ReferentialError("Currency does not exist")

    return await set_default_currency(user, currency.id, db)

@router.delete("/user/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_endpoint(
    user_id: int,
    db: AsyncSession = Depends(get_async_session),
):
    """Delete a user and all of their records"""
    user = await get_user_by_id(user_id, db)
    if not user:
        raise NotFoundError("User not found")
    await delete_user(user, db)
    return None
