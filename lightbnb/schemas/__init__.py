"""
Pydantic schemas for inputs and returned rows.
"""

# User schemas
from .user import (
    UserCreate,
    UserSignup,
    UserRecord
)

# Property schemas
from .property import (
    PropertyCreate,
    PropertyFilterOptions,
    PropertySearchParams,
    PropertyRecord
)

__all__ = [
    # User
    "UserCreate",
    "UserSignup",
    "UserRecord",

    # Property
    "PropertyCreate",
    "PropertyFilterOptions",
    "PropertySearchParams",
    "PropertyRecord"
]
