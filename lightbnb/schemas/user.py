"""
Pydantic schemas for users.
Handles user creation input, signup validation and returned user rows.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Validate an address and return it in the form signup stores it.

    Raises:
        pydantic.ValidationError: If the value is not an email address
    """
    return _email_adapter.validate_python(email.strip())


class UserCreate(BaseModel):
    """Values inserted into the users table, stored as given."""

    name: str
    email: str
    password: str


class UserSignup(UserCreate):
    """Schema for a new account signup; the password is plain text here."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        description="User's email address, normalized like EmailStr",
        examples=["tristanjacobs@gmail.com"]
    )

    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Plain text password (8 to 72 characters)"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        """Reject blank names and trim surrounding whitespace."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email", mode="before")
    @classmethod
    def normalize_signup_email(cls, v):
        """Store the address in the form login looks it up."""
        if not isinstance(v, str):
            raise ValueError("Email must be a string")
        try:
            return normalize_email(v)
        except PydanticValidationError:
            raise ValueError("value is not a valid email address")


class UserRecord(BaseModel):
    """A row from the users table."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    email: str
    password: str
