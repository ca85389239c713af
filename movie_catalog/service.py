"""
Business logic for the movie catalog.

The services are framework-agnostic: they take typed requests, apply
the validation rules, clamp pagination, and raise NotFoundError /
ValidationFailure / InfrastructureFailure for the boundary to map.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from .errors import NotFoundError, ValidationFailure
from .models import Actor, Director, Genre, Movie, Review, User
from .query import Page, clamp_pagination, clamp_top_rated_limit
from .repository import CatalogRepository, MovieRepository
from .requests import (
    GenreCreateRequest,
    MovieCreateRequest,
    MovieUpdateRequest,
    PersonCreateRequest,
    ReviewCreateRequest,
    UserCreateRequest,
)
from .utils import unique_in_order
from .validation import (
    check_reference_id,
    normalize_email,
    validate_id,
    validate_movie_changes,
    validate_movie_create,
    validate_name,
    validate_review_rating,
    validate_username,
)

logger = logging.getLogger("movie_catalog.service")


class MovieService:
    """Movie reads, writes and the partial-update builder."""

    def __init__(self, session: Session):
        self.repo = MovieRepository(session)

    def get_movie(self, movie_id: int) -> Movie:
        """Get a movie with all relations, or raise NotFoundError."""
        validate_id("Movie", movie_id)
        movie = self.repo.find_by_id(movie_id)
        if movie is None:
            raise NotFoundError("Movie", movie_id)
        return movie

    def get_movies(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        genre_id: Optional[int] = None,
        director_id: Optional[int] = None,
        min_rating: Optional[float] = None,
    ) -> Page[Movie]:
        """Browse movies with optional filters and pagination."""
        check_reference_id("Genre", genre_id)
        check_reference_id("Director", director_id)
        page, limit = clamp_pagination(page, limit)
        return self.repo.find_all(page, limit, genre_id, director_id, min_rating)

    def create_movie(self, request: MovieCreateRequest) -> Movie:
        """
        Validate and insert a movie together with its actor links.

        Raises:
            ValidationFailure: A field breaks a rule or an actor id is unknown
        """
        validate_movie_create(request)
        actor_ids = self._checked_actor_ids(request.actor_ids)

        movie_id = self.repo.create(request.column_values(), actor_ids)
        return self.get_movie(movie_id)

    def update_movie(self, movie_id: int, request: MovieUpdateRequest) -> Movie:
        """
        Apply only the supplied fields of a partial update.

        An empty change-set returns the stored movie untouched. A supplied
        actor list replaces the current actors.
        """
        existing = self.get_movie(movie_id)

        changes = request.changes()
        validate_movie_changes(changes)

        actor_ids = None
        if request.replaces_actors:
            if request.actor_ids is None:
                raise ValidationFailure("actor_ids cannot be null", details={"field": "actor_ids"})
            actor_ids = self._checked_actor_ids(request.actor_ids)

        if not changes and actor_ids is None:
            logger.info(f"Movie update with no changes: id={movie_id}")
            return existing

        if not self.repo.update(movie_id, changes, actor_ids):
            raise NotFoundError("Movie", movie_id)
        return self.get_movie(movie_id)

    def delete_movie(self, movie_id: int) -> None:
        """Soft-delete a movie."""
        validate_id("Movie", movie_id)
        if not self.repo.soft_delete(movie_id):
            raise NotFoundError("Movie", movie_id)

    def search_movies(
        self, title: str, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Movie]:
        """Case-insensitive substring search on the title."""
        if not title or not title.strip():
            raise ValidationFailure("search title is required")
        page, limit = clamp_pagination(page, limit)
        return self.repo.search_by_title(title.strip(), page, limit)

    def get_top_rated_movies(self, limit: Optional[int] = None) -> List[Movie]:
        return self.repo.get_top_rated(clamp_top_rated_limit(limit))

    def get_movies_by_genre(
        self, genre_id: int, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Movie]:
        validate_id("Genre", genre_id)
        page, limit = clamp_pagination(page, limit)
        return self.repo.find_by_genre(genre_id, page, limit)

    def get_movies_by_director(
        self, director_id: int, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Movie]:
        validate_id("Director", director_id)
        page, limit = clamp_pagination(page, limit)
        return self.repo.find_by_director(director_id, page, limit)

    def get_movies_by_actor(
        self, actor_id: int, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Movie]:
        validate_id("Actor", actor_id)
        page, limit = clamp_pagination(page, limit)
        return self.repo.find_by_actor(actor_id, page, limit)

    def _checked_actor_ids(self, actor_ids: List[int]) -> List[int]:
        """Collapse duplicates and reject ids with no live actor."""
        for actor_id in actor_ids:
            check_reference_id("Actor", actor_id)
        actor_ids = unique_in_order(actor_ids)
        missing = self.repo.missing_actor_ids(actor_ids)
        if missing:
            raise ValidationFailure(
                f"unknown actor IDs: {missing}", details={"actor_ids": missing}
            )
        return actor_ids


class CatalogService:
    """Genres, directors, actors, users and reviews."""

    def __init__(self, session: Session):
        self.repo = CatalogRepository(session)
        self.movies = MovieRepository(session)

    # ============ GENRES ============

    def create_genre(self, request: GenreCreateRequest) -> Genre:
        validate_name("Genre", request.name)
        return self.repo.add(Genre(name=request.name.strip(), description=request.description or ""))

    def get_genre(self, genre_id: int) -> Genre:
        return self._get(Genre, genre_id)

    def list_genres(self, page: Optional[int] = None, limit: Optional[int] = None) -> Page[Genre]:
        page, limit = clamp_pagination(page, limit)
        return self.repo.list_page(Genre, page, limit)

    # ============ DIRECTORS & ACTORS ============

    def create_director(self, request: PersonCreateRequest) -> Director:
        validate_name("Director", request.name)
        return self.repo.add(Director(**self._person_values(request)))

    def get_director(self, director_id: int) -> Director:
        return self._get(Director, director_id)

    def list_directors(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Director]:
        page, limit = clamp_pagination(page, limit)
        return self.repo.list_page(Director, page, limit)

    def create_actor(self, request: PersonCreateRequest) -> Actor:
        validate_name("Actor", request.name)
        return self.repo.add(Actor(**self._person_values(request)))

    def get_actor(self, actor_id: int) -> Actor:
        return self._get(Actor, actor_id)

    def list_actors(self, page: Optional[int] = None, limit: Optional[int] = None) -> Page[Actor]:
        page, limit = clamp_pagination(page, limit)
        return self.repo.list_page(Actor, page, limit)

    # ============ USERS ============

    def create_user(self, request: UserCreateRequest) -> User:
        validate_username(request.username)
        email = normalize_email(request.email)
        return self.repo.add(User(username=request.username.strip(), email=email))

    def get_user(self, user_id: int) -> User:
        return self._get(User, user_id)

    def list_users(self, page: Optional[int] = None, limit: Optional[int] = None) -> Page[User]:
        page, limit = clamp_pagination(page, limit)
        return self.repo.list_page(User, page, limit)

    # ============ REVIEWS ============

    def create_review(self, movie_id: int, request: ReviewCreateRequest) -> Review:
        """
        Add a review by an existing user to an existing movie.

        Raises:
            ValidationFailure: Bad ids or rating outside 1..10
            NotFoundError: Movie or user absent
        """
        validate_id("Movie", movie_id)
        validate_id("User", request.user_id)
        validate_review_rating(request.rating)

        if not self.movies.exists(movie_id):
            raise NotFoundError("Movie", movie_id)
        self._get(User, request.user_id)

        review = self.repo.add(
            Review(
                movie_id=movie_id,
                user_id=request.user_id,
                rating=request.rating,
                comment=request.comment or "",
            )
        )
        return self.repo.get(Review, review.id, options=[selectinload(Review.user)])

    def list_reviews(
        self, movie_id: int, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[Review]:
        validate_id("Movie", movie_id)
        if not self.movies.exists(movie_id):
            raise NotFoundError("Movie", movie_id)
        page, limit = clamp_pagination(page, limit)
        return self.repo.list_reviews(movie_id, page, limit)

    # ============ HELPERS ============

    def _get(self, model, entity_id: int):
        validate_id(model.__name__, entity_id)
        entity = self.repo.get(model, entity_id)
        if entity is None:
            raise NotFoundError(model.__name__, entity_id)
        return entity

    @staticmethod
    def _person_values(request: PersonCreateRequest) -> dict:
        return {
            "name": request.name.strip(),
            "biography": request.biography or "",
            "birth_date": request.birth_date,
            "nationality": request.nationality or "",
        }
