"""
Movie Catalog REST API.

FastAPI boundary over the movie_catalog services: movies with their
genre, director, actors and reviews, plus the supporting catalog
entities.
"""

from api.main import app

__all__ = ["app"]
