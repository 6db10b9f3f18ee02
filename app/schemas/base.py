"""Base schemas for the application."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema class with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class BaseModelSchema(BaseSchema):
    """Base schema for database models."""

    id: UUID
    created_at: datetime
    updated_at: datetime


class PartialUpdateSchema(BaseSchema):
    """Base schema for PATCH bodies.

    Each field is in one of three states: not sent, sent as null (cleared) or
    sent with a value. ``changes`` keeps the first state apart from the other
    two by reading ``model_fields_set`` instead of comparing against None.
    """

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ResponseSchema(BaseSchema):
    """Standard API response schema."""

    status: str
    message: Optional[str] = None
    data: Optional[Any] = None
