"""
Property repository for listing, filtering and inserting properties.
"""

from lightbnb.database import QueryExecutor
from lightbnb.queries import build_property_listing_query, insert_property_query
from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.property import PropertyCreate, PropertyFilterOptions, PropertyRecord
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[PropertyRecord]):
    """Repository for the properties table."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(PropertyRecord, executor)

    async def get_all_properties(
        self,
        options: Union[PropertyFilterOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyRecord]:
        """
        List properties matching every supplied filter.

        Args:
            options: Owner, nightly price range (dollars) and minimum rating filters
            limit: Maximum number of properties to return (default 10)

        Returns:
            Matching properties with their average rating
        """
        statement = build_property_listing_query(options, limit)
        return await self.fetch_all(statement, "list properties")

    async def add_property(self, property_in: Union[PropertyCreate, Dict[str, Any]]) -> Optional[PropertyRecord]:
        """
        Add a property.

        Args:
            property_in: All fourteen property fields, with ``cost_per_night`` in cents

        Returns:
            The inserted property record
        """
        if not isinstance(property_in, PropertyCreate):
            property_in = PropertyCreate.model_validate(property_in)

        created = await self.fetch_one(insert_property_query(property_in), "create property")
        if created:
            logger.info(f"Created property: {created.title} (ID: {created.id})")
        return created
