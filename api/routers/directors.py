"""
Director endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service, get_movie_service, paginate
from api.schemas.common import DataResponse, PaginatedResponse
from api.schemas.movie import MovieListItem
from api.schemas.person import PersonCreate, PersonDetail
from movie_catalog.requests import PersonCreateRequest
from movie_catalog.service import CatalogService, MovieService

router = APIRouter(prefix="/directors")


@router.get("", response_model=PaginatedResponse[PersonDetail])
def list_directors(
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    return paginate(service.list_directors(page=page, limit=limit), PersonDetail.model_validate)


@router.post("", status_code=201, response_model=DataResponse[PersonDetail])
def create_director(
    body: PersonCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    director = service.create_director(PersonCreateRequest(**body.model_dump()))
    return {"data": PersonDetail.model_validate(director)}


@router.get("/{director_id}", response_model=DataResponse[PersonDetail])
def get_director(
    director_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return {"data": PersonDetail.model_validate(service.get_director(director_id))}


@router.get("/{director_id}/movies", response_model=PaginatedResponse[MovieListItem])
def get_director_movies(
    director_id: int,
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: MovieService = Depends(get_movie_service),
):
    """Movies directed by this director."""
    result = service.get_movies_by_director(director_id, page=page, limit=limit)
    return paginate(result, MovieListItem.model_validate)
