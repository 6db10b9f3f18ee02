"""Project API controller with FastAPI endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_identity, get_db, validate_token
from app.domains.project.service import ProjectService
from app.schemas.base import ResponseSchema
from app.schemas.project import ProjectCreate, ProjectDetail, ProjectResponse, ProjectUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    dependencies=[Depends(validate_token)],  # Global token validation for all routes
)


@router.get("", response_model=ResponseSchema)
async def get_projects(
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """List the current user's projects."""

    service = ProjectService(db)
    projects = await service.get_projects(identity)

    return ResponseSchema(
        status="success",
        message="Projects retrieved successfully",
        data={
            "projects": [ProjectResponse.model_validate(p).model_dump(mode="json") for p in projects]
        },
    )


@router.post("", response_model=ResponseSchema, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""

    service = ProjectService(db)
    project = await service.create_project(project_data, identity)

    return ResponseSchema(
        status="success",
        message="Project created successfully",
        data=ProjectResponse.model_validate(project).model_dump(mode="json"),
    )


@router.get("/{project_id}", response_model=ResponseSchema)
async def get_project(
    project_id: UUID = Path(..., description="Project ID"),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get a project with its files and conversations."""

    service = ProjectService(db)
    project = await service.get_project(project_id, identity)

    return ResponseSchema(
        status="success",
        message="Project retrieved successfully",
        data=ProjectDetail.model_validate(project).model_dump(mode="json"),
    )


@router.patch("/{project_id}", response_model=ResponseSchema)
async def update_project(
    project_id: UUID = Path(..., description="Project ID"),
    project_data: ProjectUpdate = Body(...),
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """Rename a project or replace its settings."""

    service = ProjectService(db)
    project = await service.update_project(project_id, project_data, identity)

    return ResponseSchema(
        status="success",
        message="Project updated successfully",
        data=ProjectResponse.model_validate(project).model_dump(mode="json"),
    )
