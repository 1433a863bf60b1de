"""
Pydantic schemas for reservation rows.
"""

from datetime import date
from typing import Optional

from lightbnb.schemas.property import PropertyBase


class GuestReservation(PropertyBase):
    """
    A past stay: the property's columns overlaid with the reservation's.

    ``id`` is the reservation id; the property is reachable through ``property_id``.
    """

    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    average_rating: Optional[float] = None
