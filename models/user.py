"""
Provides the User model for the application's database schema.

A user is identified by a unique email address, which is also the identity
claim carried by bearer tokens. Users own projects; everything else in the
workspace (files, folders, conversations) is owned transitively through a
project.

Attributes
----------
email : sqlalchemy.Column
    The email address of the user, which must be unique.
username : sqlalchemy.Column
    The optional display name chosen by the user.
is_active : sqlalchemy.Column
    A boolean indicating if the user is active. Defaults to `True`.

Relationships
-------------
projects : sqlalchemy.orm.relationship
    One-to-many relationship with the `Project` model.
"""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class User(BaseModel):
    """
    Represents a user entity in the application.

    :ivar email: Email address of the user. It must be unique.
    :type email: str
    :ivar username: Username of the user. This is optional.
    :type username: str
    :ivar is_active: Indicates whether the user account is active.
    :type is_active: bool
    """

    __tablename__ = "users"

    email = Column(String(255), nullable=False, unique=True, index=True)
    username = Column(String(100))
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")
