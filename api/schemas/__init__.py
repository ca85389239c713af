"""Pydantic schemas for API request and response validation."""

from api.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
)
from api.schemas.genre import Genre, GenreCreate, GenreSummary
from api.schemas.movie import MovieCreate, MovieDetail, MovieListItem, MovieUpdate
from api.schemas.person import PersonCreate, PersonDetail, PersonSummary
from api.schemas.review import ReviewCreate, ReviewResponse
from api.schemas.user import UserCreate, UserResponse, UserSummary

__all__ = [
    # Common
    "DataResponse",
    "ErrorResponse",
    "ListResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    # Genre
    "Genre",
    "GenreCreate",
    "GenreSummary",
    # Movie
    "MovieCreate",
    "MovieDetail",
    "MovieListItem",
    "MovieUpdate",
    # Person
    "PersonCreate",
    "PersonDetail",
    "PersonSummary",
    # Review
    "ReviewCreate",
    "ReviewResponse",
    # User
    "UserCreate",
    "UserResponse",
    "UserSummary",
]
