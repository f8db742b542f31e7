# app/schemas/category.py
from pydantic import field_validator

from app.schemas.base import APIModel, strip_required

class CategoryCreate(APIModel):
    name: str

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return strip_required(value)

class CategoryRead(APIModel):
    id: int
    name: str
