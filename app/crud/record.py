# app/crud/record.py
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.record import Record

async def get_record_by_id(record_id: int, db: AsyncSession, reload: bool = False) -> Optional[Record]:
    query = select(Record).where(Record.id == record_id)
    if reload:
        query = query.execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalar_one_or_none()

async def list_records(
    db: AsyncSession,
    user_id: Optional[int] = None,
    category_id: Optional[int] = None,
) -> List[Record]:
    query = select(Record)
    if user_id is not None:
        query = query.where(Record.user_id == user_id)
    if category_id is not None:
        query = query.where(Record.category_id == category_id)
    result = await db.execute(query.order_by(Record.id))
    return result.scalars().all()

async def create_record(
    user_id: int,
    category_id: int,
    currency_id: int,
    amount: float,
    db: AsyncSession,
) -> Record:
    new_record = Record(
        user_id=user_id,
        category_id=category_id,
        currency_id=currency_id,
        amount=amount,
    )
    db.add(new_record)
    await db.commit()
    # Re-select to pick up created_at and the joined relations
    return await get_record_by_id(new_record.id, db, reload=True)

async def delete_record(record: Record, db: AsyncSession) -> None:
    await db.delete(record)
    await db.commit()
