"""
Custom exception classes for the LightBnB data-access layer.
Database driver errors are never wrapped; these cover lifecycle misuse and service-level rules.
"""

from typing import Any, Dict, List, Optional


class LightBnBError(Exception):
    """Base exception class carrying a machine readable error code."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class DatabaseNotConnectedError(LightBnBError):
    """Raised when a query is issued before the database handle is opened."""

    def __init__(self, detail: str = "Database is not connected; call connect() first"):
        super().__init__(detail, error_code="DATABASE_NOT_CONNECTED")


class ValidationError(LightBnBError):
    """Validation error exception."""

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, Any]]] = None
    ):
        super().__init__(detail, error_code="VALIDATION_ERROR")
        self.field_errors = field_errors or []


class NotFoundError(LightBnBError):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"
        super().__init__(detail, error_code="NOT_FOUND")


class DuplicateResourceError(LightBnBError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} with identifier '{identifier}' already exists",
            error_code="CONFLICT"
        )


class InvalidCredentialsError(LightBnBError):
    """Invalid login credentials exception."""

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail, error_code="UNAUTHORIZED")


class RecordNotCreatedError(LightBnBError):
    """An insert completed without returning the new row."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} was not created", error_code="INSERT_FAILED")
