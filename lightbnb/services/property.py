"""
Property service for listing searches, new listings and guest reservations.
Turns loosely typed caller input into validated options before reaching the repositories.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from pydantic import ValidationError as PydanticValidationError
from lightbnb.database import QueryExecutor
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyFilterOptions,
    PropertyRecord,
    PropertySearchParams
)
from lightbnb.utils.exceptions import RecordNotCreatedError, ValidationError
import logging

logger = logging.getLogger(__name__)


class PropertyService:
    """Property service wrapping the property and reservation repositories."""

    def __init__(self, executor: QueryExecutor):
        self.property_repo = PropertyRepository(executor)
        self.reservation_repo = ReservationRepository(executor)

    async def search_properties(
        self,
        filters: Union[PropertyFilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyRecord]:
        """
        Search properties by owner, nightly price range and minimum rating.

        Args:
            filters: Filter options or raw query parameters (blank values are ignored)
            limit: Maximum number of results (default 10)

        Returns:
            Matching properties

        Raises:
            ValidationError: If a filter value cannot be parsed
        """
        if filters is not None and not isinstance(filters, PropertyFilterOptions):
            try:
                filters = PropertySearchParams.model_validate(dict(filters))
            except PydanticValidationError as e:
                raise ValidationError("Invalid property filters", field_errors=e.errors())

        properties = await self.property_repo.get_all_properties(filters, limit)
        logger.debug(f"Property search returned {len(properties)} results")
        return properties

    async def create_property(
        self,
        owner_id: int,
        property_data: Union[PropertyCreate, Dict[str, Any]]
    ) -> PropertyRecord:
        """
        Create a property listing owned by the acting user.

        Args:
            owner_id: ID of the user listing the property; overrides any owner in the data
            property_data: Property fields, ``cost_per_night`` in cents

        Returns:
            Created property record

        Raises:
            ValidationError: If the property data is malformed
            RecordNotCreatedError: If the insert returned no row
        """
        if isinstance(property_data, PropertyCreate):
            property_data = property_data.model_dump()

        try:
            property_in = PropertyCreate.model_validate({**property_data, "owner_id": owner_id})
        except PydanticValidationError as e:
            raise ValidationError("Invalid property data", field_errors=e.errors())

        property_obj = await self.property_repo.add_property(property_in)
        if not property_obj:
            raise RecordNotCreatedError("Property")

        logger.info(f"Property created by user {owner_id}: {property_obj.title} (ID: {property_obj.id})")
        return property_obj

    async def get_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[PropertyRecord]:
        """List the properties reserved by a guest."""
        return await self.reservation_repo.get_all_reservations(guest_id, limit)
