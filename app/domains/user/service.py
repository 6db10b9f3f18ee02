# app/domains/user/service.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, the identity carried in tokens."""
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_user(self, email: str, username: str = None) -> User:
        """Create a new user."""
        user = User(email=email, username=username)

        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
            logger.info("Registered user %s", user.id)
            return user
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise e

    async def get_or_create_user(self, identity: str, payload: dict) -> User:
        """Get existing user or register one from the token payload."""
        user = await self.get_user_by_email(identity)
        if user:
            return user

        try:
            return await self.create_user(email=identity, username=payload.get("username"))
        except IntegrityError:
            # Registered concurrently by another request
            user = await self.get_user_by_email(identity)
            if not user:
                raise
            return user
