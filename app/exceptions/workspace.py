"""Project, conversation and user exceptions."""

from .base import NotFoundError, StorageError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is missing or not owned by the caller."""

    def __init__(self, message: str = "Project not found"):
        super().__init__(message=message, error_code="PROJECT_NOT_FOUND")


class ConversationNotFoundError(NotFoundError):
    """Raised when a conversation is missing or not owned by the caller."""

    def __init__(self, message: str = "Conversation not found"):
        super().__init__(message=message, error_code="CONVERSATION_NOT_FOUND")


class UserNotFoundError(NotFoundError):
    """Raised when no user is registered for the caller's identity."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message=message, error_code="USER_NOT_FOUND")


class WorkspaceStorageError(StorageError):
    """Raised when the database fails unexpectedly outside the file tree."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message=message)
