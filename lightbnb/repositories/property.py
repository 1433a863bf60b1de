"""
Property repository for listing searches and inserts.
Search filters are assembled as bound SQLAlchemy predicates, never as SQL text.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert, and_, func, asc
from lightbnb.database import Database
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertySearchFilters,
    InsertResult
)
from typing import Optional, List, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)

FiltersInput = Union[PropertySearchFilters, Dict[str, Any], None]


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for the properties table.
    Listings are joined with property_reviews to report an average rating.
    """

    def __init__(self, db: Database, raise_errors: bool = False):
        super().__init__(Property, db, raise_errors=raise_errors)

    async def get_all_properties(
        self,
        filters: FiltersInput = None,
        limit: Optional[int] = None
    ) -> Optional[List[PropertyListing]]:
        """
        Get properties matching the optional search filters.

        Args:
            filters: PropertySearchFilters or an equivalent dict
            limit: Maximum number of properties to return (default from settings)

        Returns:
            Properties ordered by nightly cost, each with its average rating,
            or None on failure
        """
        if limit is None:
            limit = self.default_limit

        async def action(session: AsyncSession) -> List[PropertyListing]:
            search = self.parse(PropertySearchFilters, filters if filters is not None else {})
            average_rating = func.avg(PropertyReview.rating).label("average_rating")

            query = (
                select(Property, average_rating)
                .join(PropertyReview, Property.id == PropertyReview.property_id)
            )

            conditions = self._build_filter_conditions(search)
            if conditions:
                query = query.where(and_(*conditions))

            query = (
                query
                .group_by(Property.id)
                .order_by(asc(Property.cost_per_night), asc(Property.id))
                .limit(limit)
            )

            result = await session.execute(query)
            properties = [
                PropertyListing.model_validate({**property_obj.column_values(), "average_rating": rating})
                for property_obj, rating in result.all()
            ]

            logger.debug(f"Property search returned {len(properties)} results")
            return properties

        return self.resolve(await self.run("get_all_properties", action))

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List:
        """
        Build SQLAlchemy filter conditions from search filters.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions, in a fixed order
        """
        conditions = []

        # City filter (case-sensitive partial match)
        if filters.city:
            conditions.append(Property.city.like(f"%{filters.city}%"))

        # Price range filters, both inclusive
        if filters.minimum_price_per_night is not None:
            conditions.append(Property.cost_per_night >= filters.minimum_price_per_night)
        if filters.maximum_price_per_night is not None:
            conditions.append(Property.cost_per_night <= filters.maximum_price_per_night)

        # Applied per review, before averaging
        if filters.minimum_rating is not None:
            conditions.append(PropertyReview.rating >= filters.minimum_rating)

        return conditions

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Optional[InsertResult]:
        """
        Add a property to the database.

        Args:
            property_data: The fourteen property fields

        Returns:
            InsertResult with the inserted row, or None on failure
        """
        async def action(session: AsyncSession) -> InsertResult:
            property_in = self.parse(PropertyCreate, property_data)
            table = Property.__table__
            statement = insert(table).values(**property_in.model_dump()).returning(*table.columns)

            result = await session.execute(statement)
            rows = [PropertyResponse.model_validate(dict(row._mapping)) for row in result.all()]
            await session.commit()

            for row in rows:
                logger.info(f"Created property: {row.title} (ID: {row.id})")

            return InsertResult(row_count=len(rows), rows=rows)

        return self.resolve(await self.run("add_property", action))
