"""Project schemas for request/response serialization."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from .base import BaseModelSchema, BaseSchema, PartialUpdateSchema
from .conversation import ConversationResponse
from .file import FileNodeResponse


class ProjectBase(BaseSchema):
    """Base project schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100)
    settings: Any | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the project name."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or only whitespace")
        return v


class ProjectCreate(ProjectBase):
    """Schema for creating a new project."""


class ProjectUpdate(PartialUpdateSchema):
    """Schema for updating a project."""

    name: str | None = Field(None, min_length=1, max_length=100)
    settings: Any | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Validate and clean the project name."""
        if v is None:
            raise ValueError("Project name cannot be cleared")
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or only whitespace")
        return v


class ProjectResponse(BaseModelSchema):
    """Schema for project response."""

    owner_id: UUID
    name: str
    settings: Any | None = None


class ProjectDetail(ProjectResponse):
    """Schema for a project with its files and conversations."""

    files: list[FileNodeResponse] = []
    conversations: list[ConversationResponse] = []
