"""
Pydantic schemas for user inputs and records.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from email_validator import validate_email, EmailNotValidError


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User's email address, stored and matched exactly as given",
        examples=["tristanjacobs@gmail.com"]
    )

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v):
        """Reject syntactically malformed addresses without rewriting the accepted ones.

        Local and reserved domains such as ``localhost`` or ``.test`` are accepted.
        """
        try:
            validate_email(
                v,
                check_deliverability=False,
                test_environment=True,
                globally_deliverable=False,
            )
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email format: {e}")
        return v


class UserCreate(UserBase):
    """Schema for inserting a user."""

    password: str = Field(
        ...,
        max_length=255,
        description="Opaque credential string, usually a bcrypt hash computed by the caller"
    )


class UserResponse(BaseModel):
    """User record as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    password: str
