"""File and folder API controller with FastAPI endpoints."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_identity, get_db, validate_token
from app.domains.file.service import FileService
from app.schemas.base import ResponseSchema
from app.schemas.file import FileCreate, FileNodeResponse, FileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["files"],
    dependencies=[Depends(validate_token)],
)


@router.get("/projects/{project_id}/files", response_model=ResponseSchema)
async def list_files(
    project_id: UUID = Path(..., description="Project ID"),
    parent_id: Optional[UUID] = Query(None, description="Folder to list, omitted for root"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """List the direct contents of the project root or of one folder."""

    service = FileService(db)
    files = await service.list_files(project_id, identity, parent_id=parent_id)

    return ResponseSchema(
        status="success",
        message="Files retrieved successfully",
        data={"files": [FileNodeResponse.model_validate(f).model_dump(mode="json") for f in files]},
    )


@router.post("/projects/{project_id}/files", response_model=ResponseSchema, status_code=201)
async def create_file(
    project_id: UUID = Path(..., description="Project ID"),
    file_data: FileCreate = Body(...),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Create a file or folder."""

    service = FileService(db)
    file = await service.create_file(project_id, file_data, identity)

    return ResponseSchema(
        status="success",
        message=f"{'Folder' if file.is_folder else 'File'} created successfully",
        data=FileNodeResponse.model_validate(file).model_dump(mode="json"),
    )


@router.get("/files/{file_id}", response_model=ResponseSchema)
async def get_file(
    file_id: UUID = Path(..., description="File ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get a file or folder with its direct children."""

    service = FileService(db)
    file = await service.get_file(file_id, identity)

    return ResponseSchema(
        status="success",
        message="File retrieved successfully",
        data=file.model_dump(mode="json"),
    )


@router.get("/files/{file_id}/path", response_model=ResponseSchema)
async def get_file_path(
    file_id: UUID = Path(..., description="File ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get the breadcrumb path from the project root to a node."""

    service = FileService(db)
    path = await service.get_path(file_id, identity)

    return ResponseSchema(
        status="success",
        message="File path retrieved successfully",
        data={"path": [item.model_dump(mode="json") for item in path]},
    )


@router.patch("/files/{file_id}", response_model=ResponseSchema)
async def update_file(
    file_id: UUID = Path(..., description="File ID"),
    file_data: FileUpdate = Body(...),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Rename a node or replace a file's content."""

    service = FileService(db)
    file = await service.update_file(file_id, file_data, identity)

    return ResponseSchema(
        status="success",
        message="File updated successfully",
        data=FileNodeResponse.model_validate(file).model_dump(mode="json"),
    )


@router.delete("/files/{file_id}", response_model=ResponseSchema)
async def delete_file(
    file_id: UUID = Path(..., description="File ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Delete a node together with everything beneath it."""

    service = FileService(db)
    removed = await service.delete_file(file_id, identity)

    return ResponseSchema(
        status="success",
        message="File deleted successfully",
        data={"id": str(file_id), "deleted_count": removed},
    )
