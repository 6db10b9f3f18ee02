"""User-related Pydantic schemas for request/response validation."""

from typing import Optional

from .base import BaseModelSchema


class UserResponse(BaseModelSchema):
    """Schema for user response data."""

    email: str
    username: Optional[str]
    is_active: bool
