"""
Message model for the ordered log of a conversation.
"""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Index, Text
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class MessageRole(str, enum.Enum):
    """Message role enumeration."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(BaseModel):
    """
    Represents a single message in a conversation.
    """

    __tablename__ = "messages"

    conversation_id = Column(
        UUID(), ForeignKey("conversations.id", ondelete="CASCADE"), nullable=False
    )
    role = Column(
        Enum(MessageRole, name="message_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
    )
    content = Column(Text, nullable=False)

    # Relationships
    conversation = relationship("Conversation", back_populates="messages")

    __table_args__ = (
        Index("idx_messages_conversation_created", "conversation_id", "created_at"),
    )
