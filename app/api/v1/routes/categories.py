# app/api/v1/routes/categories.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_auth
from app.core.database import get_async_session
from app.core.exceptions import NotFoundError, ValidationError
from app.crud.category import create_category, delete_category, get_category_by_id, list_categories
from app.schemas.category import CategoryCreate, CategoryRead

router = APIRouter(prefix="/category", tags=["categories"], dependencies=[Depends(require_auth)])

@router.get("", response_model=List[CategoryRead])
async def read_categories(db: AsyncSession = Depends(get_async_session)):
    return await list_categories(db)

@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category_endpoint(
    cat_in: CategoryCreate,
    db: AsyncSession = Depends(get_async_session),
):
    return await create_category(cat_in, db)

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category_endpoint(
    category_id: Optional[int] = Query(None, alias="id"),
    db: AsyncSession = Depends(get_async_session),
):
    """Delete a category and every record filed under it"""
    if category_id is None:
        raise ValidationError("Query parameter 'id' is required")

    category = await get_category_by_id(category_id, db)
    if not category:
        raise NotFoundError("Category not found")
    await delete_category(category, db)
    return None
