"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides a recording query executor, repository/service fixtures and row factories.
"""

import pytest
from typing import Any, Dict, List, Optional, Sequence

from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.services.auth import AuthService
from lightbnb.services.property import PropertyService


class FakeExecutor:
    """
    In-memory stand-in for ``Database.query``.

    Records every (text, values) call and answers with queued result sets as given.
    """

    def __init__(self, results: Optional[List[List[Dict[str, Any]]]] = None, error: Optional[Exception] = None):
        self.calls: List[tuple] = []
        self.results = list(results or [])
        self.error = error

    def queue(self, *rows: Dict[str, Any]) -> "FakeExecutor":
        """Queue one result set made of the given rows."""
        self.results.append(list(rows))
        return self

    async def query(self, text: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        self.calls.append((text, tuple(values)))
        if self.error is not None:
            raise self.error
        return self.results.pop(0) if self.results else []

    @property
    def last_call(self) -> tuple:
        return self.calls[-1]


@pytest.fixture
def executor() -> FakeExecutor:
    """Create an executor with no queued results."""
    return FakeExecutor()


# Repository fixtures
@pytest.fixture
def user_repository(executor: FakeExecutor) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(executor)


@pytest.fixture
def property_repository(executor: FakeExecutor) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(executor)


@pytest.fixture
def reservation_repository(executor: FakeExecutor) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(executor)


# Service fixtures
@pytest.fixture
def auth_service(executor: FakeExecutor) -> AuthService:
    """Create an auth service instance."""
    return AuthService(executor)


@pytest.fixture
def property_service(executor: FakeExecutor) -> PropertyService:
    """Create a property service instance."""
    return PropertyService(executor)


# Test data factories
class UserFactory:
    """Factory for users table rows."""

    @staticmethod
    def create_user_data(
        name: str = "Devin Sanders",
        email: str = "tristanjacobs@gmail.com",
        password: str = "password123"
    ) -> dict:
        """Create user input dictionary."""
        return {"name": name, "email": email, "password": password}

    @staticmethod
    def create_user_row(user_id: int = 1, **overrides) -> dict:
        """Create a row as the users table would return it."""
        row = {"id": user_id, **UserFactory.create_user_data()}
        row.update(overrides)
        return row


class PropertyFactory:
    """Factory for properties table rows."""

    @staticmethod
    def create_property_data(
        owner_id: int = 1,
        title: str = "Speed lamp",
        cost_per_night: int = 93061,
        city: str = "Namsub",
        **overrides
    ) -> dict:
        """Create the fourteen property fields."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "description",
            "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?w=350",
            "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
            "cost_per_night": cost_per_night,
            "street": "536 Namsub Highway",
            "city": city,
            "province": "Quebec",
            "post_code": "28142",
            "country": "Canada",
            "parking_spaces": 6,
            "number_of_bathrooms": 4,
            "number_of_bedrooms": 8,
        }
        data.update(overrides)
        return data

    @staticmethod
    def create_property_row(property_id: int = 1, average_rating=None, **overrides) -> dict:
        """Create a row as the listing queries would return it."""
        row = {"id": property_id, **PropertyFactory.create_property_data(**overrides)}
        row["active"] = True
        row["average_rating"] = average_rating
        return row
