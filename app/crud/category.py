# app/crud/category.py
import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.category import Category
from app.models.record import Record
from app.schemas.category import CategoryCreate

logger = logging.getLogger(__name__)

async def list_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(Category.id))
    return result.scalars().all()

async def get_category_by_id(category_id: int, db: AsyncSession) -> Optional[Category]:
    result = await db.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()

async def create_category(cat_in: CategoryCreate, db: AsyncSession) -> Category:
    new_cat = Category(name=cat_in.name)
    db.add(new_cat)
    await db.commit()
    await db.refresh(new_cat)
    return new_cat

async def delete_category(category: Category, db: AsyncSession) -> int:
    """Delete the category together with the records filed under it.

    Returns the number of records removed.
    """
    result = await db.execute(delete(Record).where(Record.category_id == category.id))
    await db.delete(category)
    await db.commit()
    logger.info(f"Deleted category {category.id} and {result.rowcount} record(s)")
    return result.rowcount
