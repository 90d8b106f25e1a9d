"""
Reservation repository for a guest's booked properties.
"""

from lightbnb.database import QueryExecutor
from lightbnb.queries import guest_reservations_query
from lightbnb.repositories.base import BaseRepository
from lightbnb.schemas.property import PropertyRecord
from typing import List, Optional


class ReservationRepository(BaseRepository[PropertyRecord]):
    """Lists the properties a guest has reserved, enriched with their average rating."""

    def __init__(self, executor: QueryExecutor):
        super().__init__(PropertyRecord, executor)

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[PropertyRecord]:
        """
        Get all reservations for a single guest.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of rows (default 10); 0 returns nothing

        Returns:
            Reserved properties, one entry per reservation
        """
        return await self.fetch_all(
            guest_reservations_query(guest_id, limit),
            f"list reservations for guest {guest_id}"
        )
