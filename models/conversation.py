"""
Conversation model: a titled message log attached to a project.
"""

from sqlalchemy import Column, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class Conversation(BaseModel):
    """
    Represents a conversation entity in the application.
    """

    __tablename__ = "conversations"

    project_id = Column(UUID(), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(200), nullable=False)

    # Relationships
    project = relationship("Project", back_populates="conversations")
    messages = relationship(
        "Message",
        back_populates="conversation",
        cascade="all, delete-orphan",
        order_by="Message.created_at",
    )

    __table_args__ = (Index("idx_conversations_project_updated", "project_id", "updated_at"),)
