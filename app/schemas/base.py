"""Shared Pydantic base: snake_case in Python, camelCase on the wire."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request/response schemas; accepts both field names and camelCase aliases."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def strip_required(value: str, field: str) -> str:
    """Trim a required text field and reject it when blank."""
    if value is None or not value.strip():
        raise ValueError(f"{field} is required")
    return value.strip()


def strip_optional(value: str | None) -> str | None:
    """Trim an optional text field; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
