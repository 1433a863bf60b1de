"""
Pydantic schemas for repository inputs and outputs.
"""

# User schemas
from .user import (
    UserBase,
    UserCreate,
    UserResponse
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertySearchFilters,
    InsertResult
)

# Reservation schemas
from .reservation import (
    GuestReservation
)

__all__ = [
    "UserBase",
    "UserCreate",
    "UserResponse",
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyListing",
    "PropertySearchFilters",
    "InsertResult",
    "GuestReservation",
]
