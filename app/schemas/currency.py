# app/schemas/currency.py
from pydantic import field_validator

from app.schemas.base import APIModel, strip_required

class CurrencyCreate(APIModel):
    code: str
    name: str

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return strip_required(value).upper()

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return strip_required(value)

class CurrencyRead(APIModel):
    id: int
    code: str
    name: str
