"""
User repository. Users are only modelled as far as cart rows need them.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity operations.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, username: str, email: str) -> User:
        """
        Create a user with normalized input.

        Raises:
            DuplicateError: If the username or email is already taken
            RepositoryError: For any unexpected database errors
        """
        logger.info("repo.user.create", extra={"username": username.strip()})
        return await self.save(
            User(username=username.strip(), email=email.strip().lower())
        )
