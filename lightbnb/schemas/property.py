"""
Pydantic schemas for property inputs, listings and search filters.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List


class PropertyBase(BaseModel):
    """Base property schema with the fourteen insertable fields."""

    owner_id: int = Field(..., description="ID of the owning user")

    title: str = Field(
        ...,
        max_length=255,
        description="Property listing title, stored as given",
        examples=["Speed lamp"]
    )

    description: str = Field(..., description="Detailed property description")

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(..., ge=0, description="Nightly cost", examples=[150])
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    country: str = Field(..., max_length=255, examples=["Canada"])
    street: str = Field(..., max_length=255, examples=["536 Namsub Highway"])
    city: str = Field(..., max_length=255, examples=["Sotboske"])
    province: str = Field(..., max_length=255, examples=["Quebec"])
    post_code: str = Field(..., max_length=255, examples=["28142"])


class PropertyCreate(PropertyBase):
    """Schema for inserting a property. Values are stored exactly as given."""


class PropertyResponse(PropertyBase):
    """Property record as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class PropertyListing(PropertyResponse):
    """Property row from a listing query, with its average review rating."""

    average_rating: Optional[float] = None


class InsertResult(BaseModel):
    """Outcome of an INSERT ... RETURNING statement."""

    command: str = "INSERT"
    row_count: int
    rows: List[PropertyResponse]

    @property
    def row(self) -> Optional[PropertyResponse]:
        """First returned row, if any."""
        return self.rows[0] if self.rows else None


class PropertySearchFilters(BaseModel):
    """
    Optional property search criteria.
    Absent fields add no predicate; blank form values count as absent.
    """

    city: Optional[str] = Field(None, description="Substring of the city, matched case-sensitively")
    minimum_price_per_night: Optional[int] = Field(None, ge=0, description="Inclusive lower bound on cost")
    maximum_price_per_night: Optional[int] = Field(None, ge=0, description="Inclusive upper bound on cost")
    minimum_rating: Optional[int] = Field(None, ge=0, description="Inclusive lower bound on review rating")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())
