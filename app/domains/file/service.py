"""File hierarchy service layer.

Owns the tree of files and folders inside a project: creation with parent
and sibling-name validation, listing, breadcrumb resolution, rename/content
updates and cascading deletes. Every operation resolves ownership first and
runs as a single transaction against the session it was given.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, case, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.config import settings
from app.domains.ownership.service import FileOwnership, OwnershipResolver
from app.exceptions.file import (
    DuplicateFileNameError,
    FileNodeNotFoundError,
    FileStorageError,
    InvalidFileOperationError,
    ParentFolderNotFoundError,
)
from app.exceptions.workspace import ProjectNotFoundError
from app.schemas.file import (
    BreadcrumbItem,
    FileCreate,
    FileNodeResponse,
    FileUpdate,
    FileWithChildren,
)
from models.file_node import FileKind, FileNode

logger = logging.getLogger(__name__)


class FileService:
    """Service class for the per-project file and folder tree."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.ownership = OwnershipResolver(db)

    async def list_files(
        self, project_id: UUID, identity: str, parent_id: Optional[UUID] = None
    ) -> List[FileNode]:
        """List the direct contents of one directory.

        ``parent_id=None`` means the project root, never "every node".
        Folders come before files, then names ascend.
        """
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        return await self._get_children(project_id, parent_id)

    async def create_file(self, project_id: UUID, file_data: FileCreate, identity: str) -> FileNode:
        """Create a file or folder at the root or inside a folder."""
        ownership = await self.ownership.resolve_project_ownership(project_id, identity)
        if not ownership:
            raise ProjectNotFoundError()

        self._validate_name(file_data.name)

        parent_id = file_data.parent_id
        if parent_id is not None:
            parent = await self._get_node_in_project(parent_id, project_id)
            if not parent:
                raise ParentFolderNotFoundError()
            if not parent.is_folder:
                raise InvalidFileOperationError("Parent must be a folder")

        # Early exit only; the unique constraints decide under concurrency
        if await self._find_sibling(project_id, parent_id, file_data.name):
            raise DuplicateFileNameError()

        file = FileNode(
            project_id=project_id,
            parent_id=parent_id,
            name=file_data.name,
            kind=file_data.kind,
            content=(file_data.content or "") if file_data.kind == FileKind.FILE else None,
        )

        try:
            self.db.add(file)
            await self.db.commit()
            await self.db.refresh(file)
        except IntegrityError as e:
            await self.db.rollback()
            raise await self._translate_integrity_error(project_id, parent_id, file_data.name) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create %s in project %s: %s", file_data.kind.value, project_id, e)
            raise FileStorageError(f"Failed to create {file_data.kind.value}") from e

        logger.info("Created %s %s in project %s", file.kind.value, file.id, project_id)
        return file

    async def get_file(self, file_id: UUID, identity: str) -> FileWithChildren:
        """Get a node together with its direct children."""
        file = (await self._require_file(file_id, identity)).file
        children = await self._get_children(file.project_id, file.id)

        return FileWithChildren(
            **FileNodeResponse.model_validate(file).model_dump(),
            children=[FileNodeResponse.model_validate(child) for child in children],
        )

    async def get_path(self, file_id: UUID, identity: str) -> List[BreadcrumbItem]:
        """Build the breadcrumb from the project root down to ``file_id``.

        Ownership is checked on the starting node only; every ancestor lives in
        the same project. A missing ancestor ends the walk early.
        """
        await self._require_file(file_id, identity)

        breadcrumb: List[BreadcrumbItem] = []
        current_id: Optional[UUID] = file_id

        while current_id:
            stmt = select(FileNode.id, FileNode.name, FileNode.kind, FileNode.parent_id).where(
                FileNode.id == current_id
            )
            result = await self.db.execute(stmt)
            current = result.one_or_none()
            if not current:
                break

            breadcrumb.insert(0, BreadcrumbItem(id=current.id, name=current.name, kind=current.kind))
            current_id = current.parent_id

        return breadcrumb

    async def update_file(self, file_id: UUID, file_data: FileUpdate, identity: str) -> FileNode:
        """Rename a node and/or replace a file's content.

        Only fields present in the request change. The parent never changes.
        """
        file = (await self._require_file(file_id, identity)).file
        changes = file_data.changes()

        if "name" in changes:
            name = changes["name"]
            if name is None:
                raise InvalidFileOperationError("File name cannot be cleared")
            self._validate_name(name)

            if name != file.name:
                existing = await self._find_sibling(
                    file.project_id, file.parent_id, name, exclude_id=file.id
                )
                if existing:
                    raise DuplicateFileNameError()
                file.name = name

        if "content" in changes:
            content = changes["content"]
            if file.is_folder:
                if content is not None:
                    raise InvalidFileOperationError("Folders cannot hold content")
            else:
                file.content = content

        project_id, parent_id, name = file.project_id, file.parent_id, file.name
        try:
            await self.db.commit()
            await self.db.refresh(file)
        except IntegrityError as e:
            await self.db.rollback()
            raise await self._translate_integrity_error(project_id, parent_id, name, file_id) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update file %s: %s", file_id, e)
            raise FileStorageError("Failed to update file") from e

        logger.info("Updated file %s (%s)", file_id, ", ".join(sorted(changes)) or "no changes")
        return file

    async def delete_file(self, file_id: UUID, identity: str) -> int:
        """Delete a node and every descendant in one transaction.

        Returns the number of nodes removed.
        """
        await self._require_file(file_id, identity)

        try:
            subtree_ids = await self._get_subtree_ids(file_id)
            await self.db.execute(delete(FileNode).where(FileNode.id.in_(subtree_ids)))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete file %s: %s", file_id, e)
            raise FileStorageError("Failed to delete file") from e

        logger.info("Deleted file %s and %d descendant(s)", file_id, len(subtree_ids) - 1)
        return len(subtree_ids)

    # Private helper methods

    async def _require_file(self, file_id: UUID, identity: str) -> FileOwnership:
        ownership = await self.ownership.resolve_file_ownership(file_id, identity)
        if not ownership:
            raise FileNodeNotFoundError()
        return ownership

    def _validate_name(self, name: str) -> None:
        if not name or len(name) > settings.max_file_name_length:
            raise InvalidFileOperationError(
                f"File name must be between 1 and {settings.max_file_name_length} characters"
            )

    def _sibling_order(self) -> tuple:
        """Folders first, then names in binary (case-sensitive) order."""
        name = FileNode.name
        if self.db.get_bind().dialect.name == "postgresql":
            name = name.collate("C")
        return (case((FileNode.kind == FileKind.FOLDER, 0), else_=1), name)

    async def _get_children(self, project_id: UUID, parent_id: Optional[UUID]) -> List[FileNode]:
        parent_clause = (
            FileNode.parent_id.is_(None) if parent_id is None else FileNode.parent_id == parent_id
        )
        stmt = (
            select(FileNode)
            .where(and_(FileNode.project_id == project_id, parent_clause))
            .order_by(*self._sibling_order())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def _get_node_in_project(self, file_id: UUID, project_id: UUID) -> Optional[FileNode]:
        stmt = select(FileNode).where(and_(FileNode.id == file_id, FileNode.project_id == project_id))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_sibling(
        self,
        project_id: UUID,
        parent_id: Optional[UUID],
        name: str,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[FileNode]:
        """Find a node named ``name`` in a directory; root is a concrete directory."""
        parent_clause = (
            FileNode.parent_id.is_(None) if parent_id is None else FileNode.parent_id == parent_id
        )
        stmt = select(FileNode).where(
            and_(FileNode.project_id == project_id, parent_clause, FileNode.name == name)
        )
        if exclude_id is not None:
            stmt = stmt.where(FileNode.id != exclude_id)

        result = await self.db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def _get_subtree_ids(self, root_id: UUID) -> List[UUID]:
        subtree = select(FileNode.id).where(FileNode.id == root_id).cte("subtree", recursive=True)
        subtree = subtree.union_all(
            select(FileNode.id).join(subtree, FileNode.parent_id == subtree.c.id)
        )
        result = await self.db.execute(select(subtree.c.id))
        return list(result.scalars().all())

    async def _translate_integrity_error(
        self,
        project_id: UUID,
        parent_id: Optional[UUID],
        name: str,
        exclude_id: Optional[UUID] = None,
    ) -> Exception:
        """Map a constraint violation to the error the caller should see.

        A sibling that now exists means a concurrent writer won the name; a
        parent that vanished means it was deleted underneath us.
        """
        if await self._find_sibling(project_id, parent_id, name, exclude_id=exclude_id):
            logger.info("Name collision on %r in project %s caught by constraint", name, project_id)
            return DuplicateFileNameError()
        if parent_id is not None and not await self._get_node_in_project(parent_id, project_id):
            return ParentFolderNotFoundError()
        logger.error("Unexpected constraint violation for %r in project %s", name, project_id)
        return FileStorageError("File storage constraint violated")
