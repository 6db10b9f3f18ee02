"""
Models package initialization.
"""

from .base import Base, BaseModel
from .conversation import Conversation
from .file_node import FileKind, FileNode
from .message import Message, MessageRole
from .project import Project
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Project",
    "FileNode",
    "FileKind",
    "Conversation",
    "Message",
    "MessageRole",
]
