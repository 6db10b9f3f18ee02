"""Project service layer with business logic."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.domains.ownership.service import OwnershipResolver
from app.exceptions.workspace import ProjectNotFoundError, UserNotFoundError, WorkspaceStorageError
from app.schemas.project import ProjectCreate, ProjectUpdate
from models.project import Project
from models.user import User

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.ownership = OwnershipResolver(db)

    async def get_projects(self, identity: str) -> List[Project]:
        """List the caller's projects, most recently updated first."""
        user = await self._require_user(identity)

        stmt = select(Project).where(Project.owner_id == user.id).order_by(desc(Project.updated_at))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_project(self, project_data: ProjectCreate, identity: str) -> Project:
        """Create a new project."""
        user = await self._require_user(identity)

        project = Project(owner_id=user.id, name=project_data.name, settings=project_data.settings)

        try:
            self.db.add(project)
            await self.db.commit()
            await self.db.refresh(project)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create project for %s: %s", identity, e)
            raise WorkspaceStorageError("Failed to create project") from e

        logger.info("Created project %s", project.id)
        return project

    async def get_project(self, project_id: UUID, identity: str) -> Project:
        """Get a project with its files and conversations."""
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        stmt = (
            select(Project)
            .options(selectinload(Project.files), selectinload(Project.conversations))
            .where(Project.id == ownership.project.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def update_project(
        self, project_id: UUID, project_data: ProjectUpdate, identity: str
    ) -> Project:
        """Rename a project or replace its settings."""
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        project = ownership.project
        for field, value in project_data.changes().items():
            setattr(project, field, value)

        try:
            await self.db.commit()
            await self.db.refresh(project)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update project %s: %s", project_id, e)
            raise WorkspaceStorageError("Failed to update project") from e

        return project

    # Private helper methods

    async def _require_user(self, identity: str) -> User:
        user = await self.ownership.resolve_user(identity)
        if not user:
            raise UserNotFoundError()
        return user
