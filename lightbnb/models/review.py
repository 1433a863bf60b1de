"""
Property review model. Ratings are only ever read back as a per-property average.
"""

from sqlalchemy import Integer, SmallInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property


class PropertyReview(Base):
    __tablename__ = "property_reviews"

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    property: Mapped["Property"] = relationship("Property", back_populates="reviews", lazy="raise")
