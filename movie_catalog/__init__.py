"""
Movie Catalog - movies, genres, directors, actors, users and reviews.

This package provides:
- The ORM entity model and database manager
- Paginated, filtered movie queries
- Validation rules and partial updates
- Services consumed by the REST API in the ``api`` package
"""

from .config import Config
from .database import DatabaseManager
from .errors import CatalogError, InfrastructureFailure, NotFoundError, ValidationFailure
from .query import MovieFilter, Page
from .requests import (
    UNSET,
    GenreCreateRequest,
    MovieCreateRequest,
    MovieUpdateRequest,
    PersonCreateRequest,
    ReviewCreateRequest,
    UserCreateRequest,
)
from .service import CatalogService, MovieService

__version__ = "1.0.0"
__all__ = [
    "Config",
    "DatabaseManager",
    "CatalogError",
    "InfrastructureFailure",
    "NotFoundError",
    "ValidationFailure",
    "MovieFilter",
    "Page",
    "UNSET",
    "GenreCreateRequest",
    "MovieCreateRequest",
    "MovieUpdateRequest",
    "PersonCreateRequest",
    "ReviewCreateRequest",
    "UserCreateRequest",
    "CatalogService",
    "MovieService",
]
