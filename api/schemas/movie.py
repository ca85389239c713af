"""
Movie-related Pydantic schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from api.schemas.genre import GenreSummary
from api.schemas.person import PersonSummary
from api.schemas.review import ReviewResponse


class MovieCreate(BaseModel):
    """Request to create a movie."""

    title: str = Field(..., description="Movie title")
    description: str = ""
    release_year: int = Field(..., description="Release year (1888-2030)")
    duration: int = Field(..., description="Runtime in minutes")
    rating: float = Field(0.0, description="Rating (0-10)")
    poster_url: str = ""
    trailer_url: str = ""
    genre_id: Optional[int] = None
    director_id: Optional[int] = None
    actor_ids: List[int] = []


class MovieUpdate(BaseModel):
    """
    Partial movie update.

    Only fields present in the request body are applied; an explicit
    null genre_id/director_id clears the reference, and actor_ids
    replaces the whole actor set.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    release_year: Optional[int] = None
    duration: Optional[int] = None
    rating: Optional[float] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    genre_id: Optional[int] = None
    director_id: Optional[int] = None
    actor_ids: Optional[List[int]] = None


class MovieListItem(BaseModel):
    """Movie item for browse/search lists."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    release_year: int
    duration: int
    rating: float
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    genre_id: Optional[int] = None
    genre: Optional[GenreSummary] = None
    director_id: Optional[int] = None
    director: Optional[PersonSummary] = None
    actors: List[PersonSummary] = []
    created_at: datetime
    updated_at: datetime


class MovieDetail(MovieListItem):
    """Complete movie details with reviews."""

    reviews: List[ReviewResponse] = []
