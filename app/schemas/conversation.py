"""Conversation schemas for request/response serialization."""

from __future__ import annotations

from uuid import UUID

from pydantic import Field, field_validator

from models.message import MessageRole

from .base import BaseModelSchema, BaseSchema


class ConversationCreate(BaseSchema):
    """Schema for creating a new conversation."""

    title: str = Field(..., min_length=1, max_length=200, description="Conversation title")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Conversation title is required")
        return v


class ConversationResponse(BaseModelSchema):
    """Schema for conversation response."""

    project_id: UUID
    title: str
    message_count: int | None = Field(None, description="Number of messages in conversation")


class MessageResponse(BaseModelSchema):
    """Schema for message response."""

    conversation_id: UUID
    role: MessageRole
    content: str
