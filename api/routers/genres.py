"""
Genre endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service, get_movie_service, paginate
from api.schemas.common import DataResponse, PaginatedResponse
from api.schemas.genre import Genre, GenreCreate
from api.schemas.movie import MovieListItem
from movie_catalog.requests import GenreCreateRequest
from movie_catalog.service import CatalogService, MovieService

router = APIRouter(prefix="/genres")


@router.get("", response_model=PaginatedResponse[Genre])
def list_genres(
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    """List genres ordered by id."""
    return paginate(service.list_genres(page=page, limit=limit), Genre.model_validate)


@router.post("", status_code=201, response_model=DataResponse[Genre])
def create_genre(
    body: GenreCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    genre = service.create_genre(GenreCreateRequest(**body.model_dump()))
    return {"data": Genre.model_validate(genre)}


@router.get("/{genre_id}", response_model=DataResponse[Genre])
def get_genre(
    genre_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return {"data": Genre.model_validate(service.get_genre(genre_id))}


@router.get("/{genre_id}/movies", response_model=PaginatedResponse[MovieListItem])
def get_genre_movies(
    genre_id: int,
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: MovieService = Depends(get_movie_service),
):
    """
    Get movies for a specific genre.

    An unknown genre yields an empty page rather than a 404.
    """
    result = service.get_movies_by_genre(genre_id, page=page, limit=limit)
    return paginate(result, MovieListItem.model_validate)
