"""
User model.
A user is a guest when holding reservations and an owner when listing properties.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.property import Property
    from lightbnb.models.reservation import Reservation


class User(Base):
    """User account, unique by email."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - must be unique"
    )

    # Stored as given; hashing is the caller's concern
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Opaque credential string"
    )

    # Relationships
    properties: Mapped[List["Property"]] = relationship(
        "Property",
        back_populates="owner",
        lazy="raise"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="guest",
        lazy="raise"
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"

    def to_dict(self) -> dict:
        """
        Convert user to dictionary.

        Returns:
            Dictionary with every column of the users table
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
        }
