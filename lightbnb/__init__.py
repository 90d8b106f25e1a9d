"""
LightBnB data-access layer.
Async PostgreSQL access for users, reservations and property listings.
"""

from lightbnb.database import Database, QueryExecutor
from lightbnb.queries import ParameterizedStatement, build_property_listing_query
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository

__version__ = "1.0.0"

__all__ = [
    "Database",
    "QueryExecutor",
    "ParameterizedStatement",
    "build_property_listing_query",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository"
]
