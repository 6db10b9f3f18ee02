"""
Test data factories for generating test objects.

This module provides Factory Boy factories for creating workspace objects
with realistic default values. Factories only build instances; the async
helpers below add them to an ``AsyncSession`` and commit.
"""

import uuid
from datetime import datetime, timedelta
from typing import Optional

import factory
from factory.alchemy import SQLAlchemyModelFactory

from models import Conversation, FileKind, FileNode, Message, MessageRole, Project, User


class UserFactory(SQLAlchemyModelFactory):
    """Factory for creating User test instances."""

    class Meta:
        model = User
        sqlalchemy_session = None  # Instances are built, then added by the helpers
        sqlalchemy_session_persistence = None

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    username = factory.Sequence(lambda n: f"testuser{n}")
    is_active = True


class ProjectFactory(SQLAlchemyModelFactory):
    """Factory for creating Project test instances."""

    class Meta:
        model = Project
        sqlalchemy_session = None
        sqlalchemy_session_persistence = None

    name = factory.Sequence(lambda n: f"Test Project {n}")
    settings = None
    # owner_id will be passed when building the project


class FileNodeFactory(SQLAlchemyModelFactory):
    """Factory for creating file FileNode test instances."""

    class Meta:
        model = FileNode
        sqlalchemy_session = None
        sqlalchemy_session_persistence = None

    name = factory.Sequence(lambda n: f"file_{n}.txt")
    kind = FileKind.FILE
    content = factory.Faker("text", max_nb_chars=200)
    parent_id = None
    # project_id will be passed when building the node


class FolderFactory(FileNodeFactory):
    """Factory for creating folder FileNode test instances."""

    name = factory.Sequence(lambda n: f"folder_{n}")
    kind = FileKind.FOLDER
    content = None


class ConversationFactory(SQLAlchemyModelFactory):
    """Factory for creating Conversation test instances."""

    class Meta:
        model = Conversation
        sqlalchemy_session = None
        sqlalchemy_session_persistence = None

    title = factory.Faker("sentence", nb_words=4)
    # project_id will be passed when building the conversation


class MessageFactory(SQLAlchemyModelFactory):
    """Factory for creating Message test instances."""

    class Meta:
        model = Message
        sqlalchemy_session = None
        sqlalchemy_session_persistence = None

    role = factory.Iterator([MessageRole.USER, MessageRole.ASSISTANT])
    content = factory.Faker("paragraph")
    # conversation_id will be passed when building the message


# Utility functions for creating test data
async def persist(session, *instances):
    """Add built instances to the session and commit them."""
    session.add_all(instances)
    await session.commit()
    return instances[0] if len(instances) == 1 else list(instances)


async def create_node(
    session,
    project_id: uuid.UUID,
    name: str,
    kind: FileKind = FileKind.FILE,
    parent_id: Optional[uuid.UUID] = None,
    content: Optional[str] = None,
) -> FileNode:
    """Insert a single node directly, bypassing the service checks."""
    factory_cls = FolderFactory if kind == FileKind.FOLDER else FileNodeFactory
    node = factory_cls.build(project_id=project_id, parent_id=parent_id, name=name)
    if kind == FileKind.FILE:
        node.content = content if content is not None else ""
    return await persist(session, node)


async def create_folder_chain(
    session, project_id: uuid.UUID, depth: int, prefix: str = "level"
) -> list[FileNode]:
    """Create ``depth`` folders, each nested inside the previous one."""
    chain = []
    parent_id = None
    for i in range(depth):
        folder = await create_node(
            session, project_id, f"{prefix}_{i}", FileKind.FOLDER, parent_id=parent_id
        )
        chain.append(folder)
        parent_id = folder.id
    return chain


async def create_conversation_with_messages(
    session, project_id: uuid.UUID, num_messages: int = 3, **conversation_kwargs
) -> tuple[Conversation, list[Message]]:
    """Create a conversation with messages spaced one minute apart."""
    conversation = await persist(
        session, ConversationFactory.build(project_id=project_id, **conversation_kwargs)
    )

    start = datetime.utcnow() - timedelta(hours=1)
    messages = [
        MessageFactory.build(
            conversation_id=conversation.id,
            created_at=start + timedelta(minutes=i),
            updated_at=start + timedelta(minutes=i),
        )
        for i in range(num_messages)
    ]
    if messages:
        await persist(session, *messages)
    return conversation, messages
