# app/schemas/user.py
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from app.schemas.base import APIModel, strip_required
from app.schemas.currency import CurrencyRead

# Accepted on POST /user (signup)
class UserCreate(APIModel):
    name: str
    # Required while AUTH_ENABLED; checked by the auth service
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return strip_required(value)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

# Public projection, never exposes the password hash
class UserRead(APIModel):
    id: int
    name: str
    email: Optional[str] = None
    default_currency_id: Optional[int] = None
    default_currency: Optional[CurrencyRead] = None

# Body of PATCH /user/{user_id}/currency
class UserCurrencyUpdate(APIModel):
    currency_id: int = Field(..., description="Currency to use when a record omits currencyId")

class LoginRequest(APIModel):
    email: str
    password: str

class LoginResponse(APIModel):
    access_token: str
    user: UserRead
