"""
Project model: the unit of ownership for files, folders and conversations.
"""

from sqlalchemy import JSON, Column, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class Project(BaseModel):
    """
    Represents a project entity in the application.
    """

    __tablename__ = "projects"

    owner_id = Column(UUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    settings = Column(JSON, nullable=True)  # free-form, never interpreted server side

    # Relationships
    owner = relationship("User", back_populates="projects")
    files = relationship(
        "FileNode",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    conversations = relationship(
        "Conversation",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("idx_projects_owner_updated", "owner_id", "updated_at"),)
