"""
Authentication service for user signup and login.
Hashes passwords before they reach the users table and checks credentials on login.
"""

from typing import Any, Dict, Union
from pydantic import ValidationError as PydanticValidationError
from lightbnb.database import QueryExecutor
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.user import UserCreate, UserRecord, UserSignup, normalize_email
from lightbnb.utils.auth import hash_password, verify_password
from lightbnb.utils.exceptions import (
    DuplicateResourceError,
    InvalidCredentialsError,
    NotFoundError,
    RecordNotCreatedError,
    ValidationError
)
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for managing user accounts.
    Database errors from the repository are not caught here.
    """

    def __init__(self, executor: QueryExecutor):
        self.user_repo = UserRepository(executor)

    async def register_user(self, signup: Union[UserSignup, Dict[str, Any]]) -> UserRecord:
        """
        Register a new user with a hashed password.

        Args:
            signup: Name, email and plain text password

        Returns:
            Created user record

        Raises:
            ValidationError: If the signup data is malformed
            DuplicateResourceError: If the email is already registered
            RecordNotCreatedError: If the insert returned no row
        """
        if not isinstance(signup, UserSignup):
            try:
                signup = UserSignup.model_validate(signup)
            except PydanticValidationError as e:
                raise ValidationError("Invalid signup data", field_errors=e.errors())

        existing_user = await self.user_repo.get_user_with_email(signup.email)
        if existing_user:
            logger.warning(f"Signup attempted with registered email: {signup.email}")
            raise DuplicateResourceError("User", signup.email)

        user = await self.user_repo.add_user(
            UserCreate(
                name=signup.name,
                email=signup.email,
                password=hash_password(signup.password)
            )
        )
        if not user:
            raise RecordNotCreatedError("User")

        logger.info(f"User registered: {user.email}")
        return user

    async def login(self, email: str, password: str) -> UserRecord:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            The authenticated user record

        Raises:
            ValidationError: If email or password is blank, or the email is malformed
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        if not email or not email.strip():
            raise ValidationError("Email is required")

        if not password:
            raise ValidationError("Password is required")

        # Same normalization signup applied before storing the address
        try:
            email = normalize_email(email)
        except PydanticValidationError as e:
            raise ValidationError("Invalid email address", field_errors=e.errors())

        user = await self.user_repo.get_user_with_email(email)

        if not user or not verify_password(password, user.password):
            logger.warning(f"Failed authentication attempt for email: {email}")
            raise InvalidCredentialsError()

        logger.info(f"User authenticated successfully: {user.email}")
        return user

    async def get_user(self, user_id: int) -> UserRecord:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If no user has that ID
        """
        user = await self.user_repo.get_user_with_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user
