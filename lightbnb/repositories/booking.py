"""
Facade over the entity repositories, exposing the whole data-access surface
from a single object.
"""

from lightbnb.database import Database
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository, FiltersInput
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate, PropertyListing, InsertResult
from lightbnb.schemas.reservation import GuestReservation
from typing import Optional, List, Dict, Any, Union


class LightBnBRepository:
    """
    Repository for users, properties and reservations.

    Every method is an independent round trip; None means "no result or error".
    """

    def __init__(self, db: Database, raise_errors: bool = False):
        self.db = db
        self.users = UserRepository(db, raise_errors=raise_errors)
        self.properties = PropertyRepository(db, raise_errors=raise_errors)
        self.reservations = ReservationRepository(db, raise_errors=raise_errors)

    # Users

    async def get_user_with_email(self, email: str) -> Optional[User]:
        return await self.users.get_user_with_email(email)

    async def get_user_with_id(self, user_id: int) -> Optional[User]:
        return await self.users.get_user_with_id(user_id)

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> Optional[User]:
        return await self.users.add_user(user)

    # Reservations

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> Optional[List[GuestReservation]]:
        return await self.reservations.get_all_reservations(guest_id, limit=limit)

    # Properties

    async def get_all_properties(self, filters: FiltersInput = None, limit: Optional[int] = None) -> Optional[List[PropertyListing]]:
        return await self.properties.get_all_properties(filters, limit=limit)

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Optional[InsertResult]:
        return await self.properties.add_property(property_data)
