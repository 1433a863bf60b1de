"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import os
import uuid
from datetime import date
from typing import AsyncGenerator, Optional

from sqlalchemy import select, func

from lightbnb.config import Settings
from lightbnb.database import Database
from lightbnb.models.user import User
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.booking import LightBnBRepository
from lightbnb.schemas.property import PropertyResponse


# In-memory SQLite by default; point at PostgreSQL with TEST_DATABASE_URL
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# A bcrypt hash; the repositories store passwords opaquely
TEST_PASSWORD = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the test database."""
    return Settings(
        environment="testing",
        database_url=TEST_DATABASE_URL,
        default_page_size=10,
    )


@pytest.fixture
async def db(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Connected database handle with a fresh schema."""
    database = Database(settings=test_settings).connect()
    await database.create_tables()
    try:
        yield database
    finally:
        await database.drop_tables()
        await database.dispose()


# Repository fixtures
@pytest.fixture
def user_repository(db: Database) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db)


@pytest.fixture
def property_repository(db: Database) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db)


@pytest.fixture
def reservation_repository(db: Database) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db)


@pytest.fixture
def repository(db: Database) -> LightBnBRepository:
    """Create the facade repository."""
    return LightBnBRepository(db)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = TEST_PASSWORD
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        user = await user_repo.add_user(UserFactory.create_user_data(**kwargs))
        assert user is not None
        return user


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 100,
        city: str = "Test City",
        **overrides
    ) -> dict:
        """Create property data dictionary with all fourteen fields."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "description",
            "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
            "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 2,
            "number_of_bedrooms": 3,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": city,
            "province": "Quebec",
            "post_code": "28142",
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> PropertyResponse:
        """Create a test property in the database."""
        result = await property_repo.add_property(PropertyFactory.create_property_data(owner_id, **kwargs))
        assert result is not None
        return result.row


async def add_review(db: Database, property_id: int, rating: int) -> PropertyReview:
    """Insert a review directly; the repositories never write reviews."""
    async with db.session() as session:
        review = PropertyReview(property_id=property_id, rating=rating)
        session.add(review)
        await session.commit()
        return review


async def add_reservation(
    db: Database,
    guest_id: int,
    property_id: int,
    start_date: date,
    end_date: date
) -> Reservation:
    """Insert a reservation directly; the repositories never write reservations."""
    async with db.session() as session:
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date
        )
        session.add(reservation)
        await session.commit()
        return reservation


async def server_today(db: Database) -> date:
    """Today as the database sees it; SQLite reports CURRENT_DATE in UTC."""
    async with db.session() as session:
        value = (await session.execute(select(func.current_date()))).scalar()
    return value if isinstance(value, date) else date.fromisoformat(value)


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(user_repository, name="Eva Stanley", email="owner@test.com")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest."""
    return await UserFactory.create_user(user_repository, name="Dominic Parks", email="guest@test.com")


@pytest.fixture
async def test_property(db: Database, property_repository: PropertyRepository, test_owner: User) -> PropertyResponse:
    """Create a reviewed test property."""
    property_obj = await PropertyFactory.create_property(
        property_repository,
        test_owner.id,
        title="Speed lamp",
        cost_per_night=150,
        city="Vancouver"
    )
    await add_review(db, property_obj.id, 4)
    await add_review(db, property_obj.id, 5)
    return property_obj


# Utility functions for tests
def assert_user_matches(user: User, user_data: dict):
    """Assert that a stored user carries the given input fields."""
    assert user.name == user_data["name"]
    assert user.email == user_data["email"]
    assert user.password == user_data["password"]


def assert_property_matches(property_obj, property_data: dict):
    """Assert that a stored property carries the given input fields."""
    for field, value in property_data.items():
        assert getattr(property_obj, field) == value, field
