# app/crud/currency.py
import logging
from typing import List, Optional

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import ConflictError, ReferentialError
from app.models.currency import Currency
from app.models.record import Record
from app.models.user import User
from app.schemas.currency import CurrencyCreate

logger = logging.getLogger(__name__)

async def list_currencies(db: AsyncSession) -> List[Currency]:
    result = await db.execute(select(Currency).order_by(Currency.id))
    return result.scalars().all()

async def get_currency_by_id(currency_id: int, db: AsyncSession) -> Optional[Currency]:
    result = await db.execute(select(Currency).where(Currency.id == currency_id))
    return result.scalar_one_or_none()

async def get_currency_by_code(code: str, db: AsyncSession) -> Optional[Currency]:
    result = await db.execute(select(Currency).where(Currency.code == code))
    return result.scalar_one_or_none()

async def create_currency(cur_in: CurrencyCreate, db: AsyncSession) -> Currency:
    if await get_currency_by_code(cur_in.code, db):
        raise ConflictError("Currency with this code already exists")

    new_cur = Currency(code=cur_in.code, name=cur_in.name)
    db.add(new_cur)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race against a concurrent insert of the same code
        await db.rollback()
        raise ConflictError("Currency with this code already exists")
    await db.refresh(new_cur)
    return new_cur

async def count_records_using_currency(currency_id: int, db: AsyncSession) -> int:
    result = await db.execute(
        select(func.count(Record.id)).where(Record.currency_id == currency_id)
    )
    return result.scalar_one()

async def delete_currency(currency: Currency, db: AsyncSession) -> None:
    """Delete a currency no record refers to.

    Users holding it as their default currency fall back to none.
    """
    if await count_records_using_currency(currency.id, db) > 0:
        raise ReferentialError("Cannot delete currency: there are records using this currency")

    await db.execute(
        update(User)
        .where(User.default_currency_id == currency.id)
        .values(default_currency_id=None)
        .execution_options(synchronize_session="fetch")
    )
    await db.delete(currency)
    await db.commit()
    logger.info(f"Deleted currency {currency.code}")
