# app/crud/user.py
import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.exceptions import ConflictError
from app.models.record import Record
from app.models.user import User

logger = logging.getLogger(__name__)

async def get_user_by_email(email: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()

async def get_user_by_id(user_id: int, db: AsyncSession, reload: bool = False) -> Optional[User]:
    query = select(User).where(User.id == user_id)
    if reload:
        # Overwrite the identity-map copy so joined relations reflect the last commit
        query = query.execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalar_one_or_none()

async def list_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()

async def create_user(
    name: str,
    email: Optional[str],
    password_hash: Optional[str],
    db: AsyncSession,
) -> User:
    user = User(name=name, email=email, password_hash=password_hash)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("User with this email already exists")
    return await get_user_by_id(user.id, db, reload=True)

async def set_default_currency(user: User, currency_id: int, db: AsyncSession) -> User:
    user.default_currency_id = currency_id
    db.add(user)
    await db.commit()
    return await get_user_by_id(user.id, db, reload=True)

async def delete_user(user: User, db: AsyncSession) -> int:
    """Delete the user and every record they own in one transaction.

    Returns the number of records removed.
    """
    result = await db.execute(delete(Record).where(Record.user_id == user.id))
    await db.delete(user)
    await db.commit()
    logger.info(f"Deleted user {user.id} and {result.rowcount} record(s)")
    return result.rowcount
