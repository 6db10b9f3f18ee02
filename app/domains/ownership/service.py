"""Ownership resolution for projects, files and conversations.

Every read or write on workspace data starts here. Ownership is transitive:
a file or conversation belongs to whoever owns its project. A resource that
exists but belongs to someone else resolves exactly like one that does not
exist, so callers can only ever answer "not found".
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy import and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import contains_eager

from models.conversation import Conversation
from models.file_node import FileNode
from models.project import Project
from models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectOwnership:
    user: User
    project: Project


@dataclass(frozen=True)
class FileOwnership:
    user: User
    file: FileNode


@dataclass(frozen=True)
class ConversationOwnership:
    user: User
    conversation: Conversation


class OwnershipResolver:
    """Answers whether an identity controls a project, file or conversation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve_user(self, identity: str) -> Optional[User]:
        """Look up the user registered for an identity."""
        result = await self.db.execute(select(User).where(User.email == identity))
        return result.scalar_one_or_none()

    async def resolve_project_ownership(
        self, project_id: UUID, identity: str
    ) -> Optional[ProjectOwnership]:
        """Resolve a project owned by the identity, or None."""
        user = await self.resolve_user(identity)
        if not user:
            return None

        # Id and owner are matched in a single lookup
        stmt = select(Project).where(and_(Project.id == project_id, Project.owner_id == user.id))
        result = await self.db.execute(stmt)
        project = result.scalar_one_or_none()
        if not project:
            logger.debug("Project %s not resolvable for %s", project_id, identity)
            return None

        return ProjectOwnership(user=user, project=project)

    async def resolve_file_ownership(self, file_id: UUID, identity: str) -> Optional[FileOwnership]:
        """Resolve a file loaded together with its project, or None."""
        user = await self.resolve_user(identity)
        if not user:
            return None

        stmt = (
            select(FileNode)
            .join(FileNode.project)
            .options(contains_eager(FileNode.project))
            .where(FileNode.id == file_id)
        )
        result = await self.db.execute(stmt)
        file = result.scalar_one_or_none()
        if not file or file.project.owner_id != user.id:
            logger.debug("File %s not resolvable for %s", file_id, identity)
            return None

        return FileOwnership(user=user, file=file)

    async def resolve_conversation_ownership(
        self, conversation_id: UUID, identity: str
    ) -> Optional[ConversationOwnership]:
        """Resolve a conversation loaded together with its project, or None."""
        user = await self.resolve_user(identity)
        if not user:
            return None

        stmt = (
            select(Conversation)
            .join(Conversation.project)
            .options(contains_eager(Conversation.project))
            .where(Conversation.id == conversation_id)
        )
        result = await self.db.execute(stmt)
        conversation = result.scalar_one_or_none()
        if not conversation or conversation.project.owner_id != user.id:
            logger.debug("Conversation %s not resolvable for %s", conversation_id, identity)
            return None

        return ConversationOwnership(user=user, conversation=conversation)
