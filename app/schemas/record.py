# app/schemas/record.py
from typing import Optional
from datetime import datetime
from pydantic import Field

from app.schemas.base import APIModel
from app.schemas.category import CategoryRead
from app.schemas.currency import CurrencyRead
from app.schemas.user import UserRead

class RecordCreate(APIModel):
    user_id: int
    category_id: int
    amount: float = Field(..., description="Amount spent, stored as given")
    # Falls back to the user's default currency when omitted
    currency_id: Optional[int] = None

class RecordRead(APIModel):
    id: int
    user_id: int
    category_id: int
    currency_id: int
    amount: float
    created_at: datetime

class RecordDetail(RecordRead):
    user: UserRead
    category: CategoryRead
    currency: CurrencyRead
