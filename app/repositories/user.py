"""User repository for database operations."""

from collections.abc import Sequence

from sqlalchemy import select

from app.models.user import UserDB
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Users are only read here; signup lives outside this service and seeds
    rows through ``create``.
    """

    model = UserDB

    async def create(self, username: str, email: str, password_hash: str | None = None) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            email: Unique email address
            password_hash: Already hashed password, if any

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username or email already exists
            DatabaseError: For other database errors
        """
        return await self._add_and_refresh(
            UserDB(username=username, email=email, password_hash=password_hash),
        )

    async def get_many(self, user_ids: Sequence[int]) -> dict[int, UserDB]:
        """
        Get several users in one query.

        Args:
            user_ids: IDs to look up; duplicates are fine

        Returns:
            dict[int, UserDB]: Found users keyed by ID, missing IDs omitted
        """
        if not user_ids:
            return {}
        # pyrefly: ignore [missing-attribute]
        result = await self.session.execute(select(UserDB).where(UserDB.id.in_(set(user_ids))))
        return {user.id: user for user in result.scalars().all() if user.id is not None}
