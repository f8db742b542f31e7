# app/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python, readable from ORM rows."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def strip_required(value: str) -> str:
    """Trim a required text field and reject it when nothing is left."""
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value
