"""
Reservation repository. Reservations are read-only here: the only operation
lists a guest's completed stays.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, asc
from lightbnb.database import Database
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.reservation import GuestReservation
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):

    def __init__(self, db: Database, raise_errors: bool = False):
        super().__init__(Reservation, db, raise_errors=raise_errors)

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> Optional[List[GuestReservation]]:
        """
        Get a guest's past reservations with the reserved property and its average rating.

        Only stays whose end date is before today (server clock) are returned,
        earliest start date first.

        Args:
            guest_id: Identifier of the guest
            limit: Maximum number of reservations to return (default from settings)

        Returns:
            List of GuestReservation rows, or None on failure
        """
        if limit is None:
            limit = self.default_limit

        async def action(session: AsyncSession) -> List[GuestReservation]:
            average_rating = func.avg(PropertyReview.rating).label("average_rating")

            query = (
                select(Property, Reservation, average_rating)
                .join(Reservation, Property.id == Reservation.property_id)
                .join(PropertyReview, Property.id == PropertyReview.property_id)
                .where(
                    Reservation.guest_id == guest_id,
                    Reservation.end_date < func.current_date()
                )
                .group_by(Property.id, Reservation.id)
                .order_by(asc(Reservation.start_date), asc(Reservation.id))
                .limit(limit)
            )

            result = await session.execute(query)
            # Reservation columns win over property columns, so ``id`` is the reservation's
            reservations = [
                GuestReservation.model_validate({
                    **property_obj.column_values(),
                    **reservation.column_values(),
                    "average_rating": rating,
                })
                for property_obj, reservation, rating in result.all()
            ]

            logger.debug(f"Retrieved {len(reservations)} past reservations for guest {guest_id}")
            return reservations

        return self.resolve(await self.run("get_all_reservations", action))
