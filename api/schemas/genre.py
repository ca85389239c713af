"""
Genre-related Pydantic schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GenreCreate(BaseModel):
    """Request to create a genre."""

    name: str = Field(..., description="Genre name")
    description: str = ""


class GenreSummary(BaseModel):
    """Genre as embedded in movie results."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class Genre(GenreSummary):
    """Complete genre record."""

    description: str = ""
    created_at: datetime
    updated_at: datetime
