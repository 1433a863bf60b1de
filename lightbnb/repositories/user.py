"""
User repository: lookups by email or id, and inserts.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.database import Database
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from typing import Optional, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for the users table."""

    def __init__(self, db: Database, raise_errors: bool = False):
        super().__init__(User, db, raise_errors=raise_errors)

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Get a single user given their email.

        Args:
            email: Email to match exactly (case-sensitive)

        Returns:
            User instance, or None if not found or on failure
        """
        async def action(session: AsyncSession) -> Optional[User]:
            return await self.get_by_field(session, "email", email)

        return self.resolve(await self.run("get_user_with_email", action))

    async def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Get a single user given their id.

        Args:
            user_id: Identifier of the user

        Returns:
            User instance, or None if not found or on failure
        """
        async def action(session: AsyncSession) -> Optional[User]:
            return await self.get_by_field(session, "id", user_id)

        return self.resolve(await self.run("get_user_with_id", action))

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> Optional[User]:
        """
        Add a new user to the database.

        Args:
            user: Name, password and email of the user

        Returns:
            Persisted user with its generated id, or None on failure
            (invalid input, duplicate email, unreachable database)
        """
        async def action(session: AsyncSession) -> User:
            user_in = self.parse(UserCreate, user)
            created_user = await self.create(session, user_in.model_dump())
            logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
            return created_user

        return self.resolve(await self.run("add_user", action))
