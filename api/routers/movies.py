"""
Movie endpoints, including reviews of a movie.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service, get_movie_service, paginate
from api.schemas.common import (
    DataResponse,
    ListResponse,
    MessageResponse,
    PaginatedResponse,
)
from api.schemas.movie import MovieCreate, MovieDetail, MovieListItem, MovieUpdate
from api.schemas.review import ReviewCreate, ReviewResponse
from movie_catalog.requests import (
    MovieCreateRequest,
    MovieUpdateRequest,
    ReviewCreateRequest,
)
from movie_catalog.service import CatalogService, MovieService

router = APIRouter(prefix="/movies")


@router.get("", response_model=PaginatedResponse[MovieListItem])
def list_movies(
    page: Optional[int] = Query(None, description="Page number (default 1)"),
    limit: Optional[int] = Query(None, description="Items per page (default 10, max 100)"),
    genre_id: Optional[int] = Query(None, description="Filter by genre"),
    director_id: Optional[int] = Query(None, description="Filter by director"),
    min_rating: Optional[float] = Query(None, description="Minimum rating"),
    service: MovieService = Depends(get_movie_service),
):
    """
    Browse movies with filtering and pagination.

    Out-of-range page/limit values are clamped, not rejected.
    """
    result = service.get_movies(
        page=page,
        limit=limit,
        genre_id=genre_id,
        director_id=director_id,
        min_rating=min_rating,
    )
    return paginate(result, MovieListItem.model_validate)


@router.post("", status_code=201, response_model=DataResponse[MovieDetail])
def create_movie(
    body: MovieCreate,
    service: MovieService = Depends(get_movie_service),
):
    """Create a movie and link its actors."""
    movie = service.create_movie(MovieCreateRequest(**body.model_dump()))
    return {"data": MovieDetail.model_validate(movie)}


@router.get("/search", response_model=PaginatedResponse[MovieListItem])
def search_movies(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by title."""
    result = service.search_movies(title or "", page=page, limit=limit)
    return paginate(result, MovieListItem.model_validate)


@router.get("/top-rated", response_model=ListResponse[MovieListItem])
def top_rated_movies(
    limit: Optional[int] = Query(None, description="Number of results (default 10, max 50)"),
    service: MovieService = Depends(get_movie_service),
):
    """Highest rated movies, best first."""
    movies = service.get_top_rated_movies(limit)
    return {"data": [MovieListItem.model_validate(m) for m in movies]}


@router.get("/{movie_id}", response_model=DataResponse[MovieDetail])
def get_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service),
):
    """Get complete details for a movie, including reviews."""
    return {"data": MovieDetail.model_validate(service.get_movie(movie_id))}


@router.put("/{movie_id}", response_model=DataResponse[MovieDetail])
def update_movie(
    movie_id: int,
    body: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
):
    """
    Partially update a movie.

    Fields missing from the body are left untouched; an explicit null
    genre_id/director_id clears the reference.
    """
    request = MovieUpdateRequest(**body.model_dump(exclude_unset=True))
    movie = service.update_movie(movie_id, request)
    return {"data": MovieDetail.model_validate(movie)}


@router.delete("/{movie_id}", response_model=MessageResponse)
def delete_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service),
):
    """Soft-delete a movie."""
    service.delete_movie(movie_id)
    return {"message": "Movie deleted successfully"}


@router.get("/{movie_id}/reviews", response_model=PaginatedResponse[ReviewResponse])
def list_movie_reviews(
    movie_id: int,
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    """Reviews of a movie, oldest first."""
    result = service.list_reviews(movie_id, page=page, limit=limit)
    return paginate(result, ReviewResponse.model_validate)


@router.post("/{movie_id}/reviews", status_code=201, response_model=DataResponse[ReviewResponse])
def create_movie_review(
    movie_id: int,
    body: ReviewCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    """Add a review by an existing user."""
    review = service.create_review(movie_id, ReviewCreateRequest(**body.model_dump()))
    return {"data": ReviewResponse.model_validate(review)}
