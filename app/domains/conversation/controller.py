"""Conversation API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_identity, get_db, validate_token
from app.domains.conversation.service import ConversationService
from app.schemas.base import ResponseSchema
from app.schemas.conversation import ConversationCreate, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["conversations"],
    dependencies=[Depends(validate_token)],
)


@router.get("/projects/{project_id}/conversations", response_model=ResponseSchema)
async def get_conversations(
    project_id: UUID = Path(..., description="Project ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """List all conversations in a project."""

    service = ConversationService(db)
    conversations = await service.get_conversations(project_id, identity)

    return ResponseSchema(
        status="success",
        message="Conversations retrieved successfully",
        data={"conversations": [c.model_dump(mode="json") for c in conversations]},
    )


@router.post(
    "/projects/{project_id}/conversations", response_model=ResponseSchema, status_code=201
)
async def create_conversation(
    project_id: UUID = Path(..., description="Project ID"),
    conversation_data: ConversationCreate = Body(...),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Create a new conversation."""

    service = ConversationService(db)
    conversation = await service.create_conversation(project_id, conversation_data, identity)

    return ResponseSchema(
        status="success",
        message="Conversation created successfully",
        data=conversation.model_dump(mode="json"),
    )


@router.get("/conversations/{conversation_id}", response_model=ResponseSchema)
async def get_conversation(
    conversation_id: UUID = Path(..., description="Conversation ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get conversation details."""

    service = ConversationService(db)
    conversation = await service.get_conversation(conversation_id, identity)

    return ResponseSchema(
        status="success",
        message="Conversation retrieved successfully",
        data=conversation.model_dump(mode="json"),
    )


@router.get("/conversations/{conversation_id}/messages", response_model=ResponseSchema)
async def get_conversation_messages(
    conversation_id: UUID = Path(..., description="Conversation ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get all messages in a conversation."""

    service = ConversationService(db)
    messages = await service.get_messages(conversation_id, identity)

    return ResponseSchema(
        status="success",
        message="Messages retrieved successfully",
        data={
            "messages": [MessageResponse.model_validate(m).model_dump(mode="json") for m in messages]
        },
    )
