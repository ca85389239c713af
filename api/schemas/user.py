"""
User-related Pydantic schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Request to create a user."""

    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")


class UserSummary(BaseModel):
    """User as embedded in reviews."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class UserResponse(UserSummary):
    """Complete user record."""

    email: str
    created_at: datetime
    updated_at: datetime
