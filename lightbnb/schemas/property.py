"""
Pydantic schemas for properties.
Handles property creation input, listing filter options and returned property rows.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional
from decimal import Decimal


class PropertyFilterOptions(BaseModel):
    """
    Optional constraints for the property listing.
    Every field is optional; an unset field places no constraint on that dimension.
    Values are carried as given; use ``PropertySearchParams`` to parse raw input.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    owner_id: Optional[Any] = Field(
        None,
        alias="ownerId",
        description="Only list properties owned by this user"
    )

    minimum_price_per_night: Optional[Any] = Field(
        None,
        alias="minPricePerNight",
        description="Lowest nightly price, in dollars"
    )

    maximum_price_per_night: Optional[Any] = Field(
        None,
        alias="maxPricePerNight",
        description="Highest nightly price, in dollars"
    )

    minimum_rating: Optional[Any] = Field(
        None,
        alias="minRating",
        description="Lowest average review rating"
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_unset(cls, v):
        """Treat empty form/query-string values as not supplied."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PropertySearchParams(PropertyFilterOptions):
    """Filter options parsed from loosely typed input such as query-string values."""

    owner_id: Optional[int] = Field(None, alias="ownerId")
    minimum_price_per_night: Optional[Decimal] = Field(None, alias="minPricePerNight")
    maximum_price_per_night: Optional[Decimal] = Field(None, alias="maxPricePerNight")
    minimum_rating: Optional[Decimal] = Field(None, alias="minRating")


class PropertyCreate(BaseModel):
    """Schema for inserting a property; ``cost_per_night`` is in cents."""

    owner_id: int = Field(..., description="ID of the owning user")
    title: str = Field(..., description="Listing title")
    description: str = Field("", description="Listing description")
    thumbnail_photo_url: str = Field(..., description="Thumbnail image URL")
    cover_photo_url: str = Field(..., description="Cover image URL")
    cost_per_night: int = Field(..., description="Nightly price in cents")
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0


class PropertyRecord(BaseModel):
    """A row from the properties table, optionally enriched with its average rating."""

    model_config = ConfigDict(extra="allow")

    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None
    average_rating: Optional[Decimal] = None

    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in dollars."""
        return Decimal(self.cost_per_night) / 100
