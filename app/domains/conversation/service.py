"""Conversation service layer.

Conversations hang off a project and are listed, created and read through
the same ownership rules as the file tree.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.domains.ownership.service import OwnershipResolver
from app.exceptions.workspace import (
    ConversationNotFoundError,
    ProjectNotFoundError,
    WorkspaceStorageError,
)
from app.schemas.conversation import ConversationCreate, ConversationResponse
from models.conversation import Conversation
from models.message import Message

logger = logging.getLogger(__name__)


class ConversationService:
    """Service class for conversations and their message logs."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.ownership = OwnershipResolver(db)

    async def get_conversations(self, project_id: UUID, identity: str) -> List[ConversationResponse]:
        """List a project's conversations, most recently updated first, with message counts."""
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        message_counts = (
            select(Message.conversation_id, func.count(Message.id).label("message_count"))
            .group_by(Message.conversation_id)
            .subquery()
        )
        stmt = (
            select(Conversation, func.coalesce(message_counts.c.message_count, 0))
            .outerjoin(message_counts, message_counts.c.conversation_id == Conversation.id)
            .where(Conversation.project_id == project_id)
            .order_by(desc(Conversation.updated_at))
        )
        result = await self.db.execute(stmt)

        return [
            self._to_response(conversation, count) for conversation, count in result.all()
        ]

    async def create_conversation(
        self, project_id: UUID, conversation_data: ConversationCreate, identity: str
    ) -> ConversationResponse:
        """Start a new, empty conversation in a project."""
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        conversation = Conversation(project_id=project_id, title=conversation_data.title)

        try:
            self.db.add(conversation)
            await self.db.commit()
            await self.db.refresh(conversation)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create conversation in project %s: %s", project_id, e)
            raise WorkspaceStorageError("Failed to create conversation") from e

        logger.info("Created conversation %s in project %s", conversation.id, project_id)
        return self._to_response(conversation, 0)

    async def get_conversation(self, conversation_id: UUID, identity: str) -> ConversationResponse:
        """Get a conversation with its message count."""
        ownership = await self.ownership.resolve_conversation_ownership(conversation_id, identity)
        if not ownership:
            raise ConversationNotFoundError()

        count = await self._count_messages(conversation_id)
        return self._to_response(ownership.conversation, count)

    async def get_messages(self, conversation_id: UUID, identity: str) -> List[Message]:
        """Get every message of a conversation in chronological order."""
        ownership = await self.ownership.resolve_conversation_ownership(conversation_id, identity)
        if not ownership:
            raise ConversationNotFoundError()

        stmt = (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.created_at, Message.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    # Private helper methods

    async def _count_messages(self, conversation_id: UUID) -> int:
        stmt = select(func.count(Message.id)).where(Message.conversation_id == conversation_id)
        result = await self.db.execute(stmt)
        return result.scalar() or 0

    @staticmethod
    def _to_response(conversation: Conversation, message_count: int) -> ConversationResponse:
        return ConversationResponse(
            id=conversation.id,
            project_id=conversation.project_id,
            title=conversation.title,
            message_count=message_count,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
        )
