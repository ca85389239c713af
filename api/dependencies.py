"""
Dependency injection for the API.

Provides the cached configuration and database manager, a session per
request, and the services built on that session.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Iterator, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from movie_catalog.config import Config
from movie_catalog.database import DatabaseManager
from movie_catalog.query import Page
from movie_catalog.service import CatalogService, MovieService


@lru_cache()
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()


@lru_cache()
def get_db() -> DatabaseManager:
    """Get cached DatabaseManager instance, creating missing tables."""
    config = get_config()
    db = DatabaseManager(config)
    db.check_and_create_tables()
    if config.seed_on_startup:
        db.seed()
    return db


def get_session(db: DatabaseManager = Depends(get_db)) -> Iterator[Session]:
    """One session per request, closed when the response is done."""
    session = db.get_session()
    try:
        yield session
    finally:
        session.close()


def get_movie_service(session: Session = Depends(get_session)) -> MovieService:
    return MovieService(session)


def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(session)


def paginate(result: Page, serialize: Optional[Callable[[Any], Any]] = None) -> Dict:
    """
    Create a paginated response structure.

    Args:
        result: Page returned by a service
        serialize: Converts each item (e.g. a schema's model_validate)

    Returns:
        Dictionary with data and pagination metadata
    """
    items: List = result.items
    if serialize is not None:
        items = [serialize(item) for item in items]
    return {
        "data": items,
        "pagination": {
            "page": result.page,
            "limit": result.limit,
            "total": result.total,
            "total_pages": result.total_pages,
            "has_next": result.has_next,
            "has_prev": result.has_prev,
        },
    }
