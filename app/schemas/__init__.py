# ruff: noqa: F403, F401
"""Schemas package initialization."""

from .base import *
from .conversation import *
from .file import *
from .project import *
from .user import *
