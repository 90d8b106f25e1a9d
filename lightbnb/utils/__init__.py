"""
Utility modules for password hashing and error types.
"""

from .auth import hash_password, verify_password
from .exceptions import (
    LightBnBError,
    DatabaseNotConnectedError,
    ValidationError,
    NotFoundError,
    DuplicateResourceError,
    InvalidCredentialsError,
    RecordNotCreatedError
)

__all__ = [
    # Authentication utilities
    "hash_password",
    "verify_password",

    # Exceptions
    "LightBnBError",
    "DatabaseNotConnectedError",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "InvalidCredentialsError",
    "RecordNotCreatedError"
]
