"""
Service layer for business logic.
"""

from .auth import AuthService
from .property import PropertyService

__all__ = [
    "AuthService",
    "PropertyService"
]
