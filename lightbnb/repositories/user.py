"""
User repository for account lookup and creation.
"""

from lightbnb.database import QueryExecutor
from lightbnb.queries import insert_user_query, user_with_email_query, user_with_id_query
from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.user import UserCreate, UserRecord
from typing import Any, Dict, Optional, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserRecord]):
    """Repository for the users table."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(UserRecord, executor)

    async def get_user_with_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a single user given their email.

        Args:
            email: Email address to search for, matched exactly

        Returns:
            User record if found, None otherwise
        """
        return await self.fetch_one(user_with_email_query(email), f"get user by email {email}")

    async def get_user_with_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Get a single user given their id.

        Args:
            user_id: ID of the user

        Returns:
            User record if found, None otherwise
        """
        return await self.fetch_one(user_with_id_query(user_id), f"get user by id {user_id}")

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> Optional[UserRecord]:
        """
        Add a new user. The password is stored exactly as given.

        Args:
            user: Name, email and password of the new user

        Returns:
            The inserted user record, including its new ID
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)

        created = await self.fetch_one(
            insert_user_query(user.name, user.email, user.password),
            f"create user {user.email}"
        )
        if created:
            logger.info(f"Created user: {created.email} (ID: {created.id})")
        return created
