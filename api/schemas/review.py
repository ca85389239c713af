"""
Review-related Pydantic schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from api.schemas.user import UserSummary


class ReviewCreate(BaseModel):
    """Request to review a movie."""

    user_id: int = Field(..., description="Reviewing user")
    rating: float = Field(..., description="Rating value (1-10)")
    comment: str = ""


class ReviewResponse(BaseModel):
    """Review with its author."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    movie_id: int
    user_id: int
    rating: float
    comment: str = ""
    user: UserSummary
    created_at: datetime
    updated_at: datetime
