"""
FileNode model for the per-project file and folder hierarchy.

Every node belongs to exactly one project and optionally to a parent folder
of that same project; a null ``parent_id`` places the node at the project
root. Sibling names are unique, and the database enforces it: the composite
unique constraint covers nodes inside folders, while root level nodes (where
``parent_id`` is NULL and therefore never collides in a plain unique
constraint) are covered by a partial unique index.
"""

import enum

from sqlalchemy import Column, Enum, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import UUID, BaseModel


class FileKind(str, enum.Enum):
    """Kind of a node in the hierarchy."""

    FILE = "file"
    FOLDER = "folder"


class FileNode(BaseModel):
    """
    Represents a file or folder inside a project.

    :ivar project_id: Owning project.
    :type project_id: UUID
    :ivar parent_id: Parent folder, or None at the project root.
    :type parent_id: UUID
    :ivar name: Name, unique among siblings (case-sensitive).
    :type name: str
    :ivar kind: ``file`` or ``folder``.
    :type kind: FileKind
    :ivar content: Text content for files; always None for folders.
    :type content: str
    """

    __tablename__ = "files"

    project_id = Column(UUID(), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    parent_id = Column(UUID(), ForeignKey("files.id", ondelete="CASCADE"), nullable=True)
    name = Column(String(255), nullable=False)
    kind = Column(
        Enum(FileKind, name="file_kind", values_callable=lambda kinds: [k.value for k in kinds]),
        nullable=False,
    )
    content = Column(Text, nullable=True)

    # Relationships
    project = relationship("Project", back_populates="files")
    parent = relationship("FileNode", remote_side="FileNode.id", back_populates="children")
    children = relationship("FileNode", back_populates="parent", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("project_id", "parent_id", "name", name="uq_files_project_parent_name"),
        Index(
            "uq_files_project_root_name",
            "project_id",
            "name",
            unique=True,
            sqlite_where=parent_id.is_(None),
            postgresql_where=parent_id.is_(None),
        ),
        Index("idx_files_project_parent", "project_id", "parent_id"),
    )

    @property
    def is_folder(self) -> bool:
        return self.kind == FileKind.FOLDER
