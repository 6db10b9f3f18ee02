"""File hierarchy exceptions."""

from .base import BaseAppException, ConflictError, NotFoundError, StorageError


class FileNodeNotFoundError(NotFoundError):
    """Raised when a file or folder is missing or not owned by the caller."""

    def __init__(self, message: str = "File not found"):
        super().__init__(message=message, error_code="FILE_NOT_FOUND")


class ParentFolderNotFoundError(NotFoundError):
    """Raised when the requested parent does not exist in the project."""

    def __init__(self, message: str = "Parent folder not found"):
        super().__init__(message=message, error_code="PARENT_NOT_FOUND")


class InvalidFileOperationError(BaseAppException):
    """Raised when an operation would break the shape of the tree."""

    def __init__(self, message: str = "Invalid file operation"):
        super().__init__(message=message, status_code=400, error_code="INVALID_FILE_OPERATION")


class DuplicateFileNameError(ConflictError):
    """Raised when a sibling with the same name already exists."""

    def __init__(
        self,
        message: str = "A file or folder with this name already exists in this location",
    ):
        super().__init__(message=message, error_code="DUPLICATE_FILE_NAME")


class FileStorageError(StorageError):
    """Raised when the database fails unexpectedly during a tree operation."""

    def __init__(self, message: str = "File storage operation failed"):
        super().__init__(message=message, error_code="FILE_STORAGE_ERROR")
