"""
Actor endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service, get_movie_service, paginate
from api.schemas.common import DataResponse, PaginatedResponse
from api.schemas.movie import MovieListItem
from api.schemas.person import PersonCreate, PersonDetail
from movie_catalog.requests import PersonCreateRequest
from movie_catalog.service import CatalogService, MovieService

router = APIRouter(prefix="/actors")


@router.get("", response_model=PaginatedResponse[PersonDetail])
def list_actors(
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    return paginate(service.list_actors(page=page, limit=limit), PersonDetail.model_validate)


@router.post("", status_code=201, response_model=DataResponse[PersonDetail])
def create_actor(
    body: PersonCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    actor = service.create_actor(PersonCreateRequest(**body.model_dump()))
    return {"data": PersonDetail.model_validate(actor)}


@router.get("/{actor_id}", response_model=DataResponse[PersonDetail])
def get_actor(
    actor_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return {"data": PersonDetail.model_validate(service.get_actor(actor_id))}


@router.get("/{actor_id}/movies", response_model=PaginatedResponse[MovieListItem])
def get_actor_movies(
    actor_id: int,
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: MovieService = Depends(get_movie_service),
):
    """
    Movies this actor appears in.

    Each movie is listed once however the cast is stored.
    """
    result = service.get_movies_by_actor(actor_id, page=page, limit=limit)
    return paginate(result, MovieListItem.model_validate)
