"""File and folder schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from models.file_node import FileKind

from .base import BaseModelSchema, BaseSchema, PartialUpdateSchema

FILE_NAME_MAX_LENGTH = 255


class FileCreate(BaseSchema):
    """Schema for creating a file or folder."""

    name: str = Field(..., min_length=1, max_length=FILE_NAME_MAX_LENGTH)
    kind: FileKind = Field(..., description="Either 'file' or 'folder'")
    content: str | None = Field(None, description="Initial content, ignored for folders")
    parent_id: UUID | None = Field(None, description="Parent folder, omitted for project root")


class FileUpdate(PartialUpdateSchema):
    """Schema for renaming a node or replacing a file's content."""

    name: str | None = Field(None, min_length=1, max_length=FILE_NAME_MAX_LENGTH)
    content: str | None = None


class FileNodeResponse(BaseModelSchema):
    """Schema for file response."""

    project_id: UUID
    parent_id: UUID | None = None
    name: str
    kind: FileKind
    content: str | None = None


class FileWithChildren(FileNodeResponse):
    """Schema for a node and its direct children."""

    children: list[FileNodeResponse] = []


class BreadcrumbItem(BaseSchema):
    """One step of a breadcrumb path."""

    id: UUID
    name: str
    kind: FileKind
