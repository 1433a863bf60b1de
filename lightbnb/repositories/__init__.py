"""
Repository layer for data access operations.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.booking import LightBnBRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PropertyRepository",
    "ReservationRepository",
    "LightBnBRepository",
]
