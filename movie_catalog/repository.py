"""
Repositories over the catalog ORM model.

Handles all datastore access for the services:
- Paginated movie queries with eager-loaded relations
- Movie writes, including explicit movie_actors membership writes
- Simple create/get/list for genres, directors, actors, users, reviews

Repositories return None for missing rows and translate SQLAlchemy
errors into catalog errors after rolling the session back.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from .errors import InfrastructureFailure, ValidationFailure
from .models import Actor, Movie, Review, SoftDeleteMixin, movie_actors
from .query import MovieFilter, Page, fetch_page

M = TypeVar("M", bound=SoftDeleteMixin)

logger = logging.getLogger("movie_catalog.repository")

# Relations loaded for list results
LIST_LOAD_OPTIONS = (
    selectinload(Movie.genre),
    selectinload(Movie.director),
    selectinload(Movie.actors),
)

# Single-record fetch also brings reviews with their authors
DETAIL_LOAD_OPTIONS = LIST_LOAD_OPTIONS + (
    selectinload(Movie.reviews).selectinload(Review.user),
)


class BaseRepository:
    """Session holder with shared error translation."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _database_errors(self, action: str) -> Iterator[None]:
        """Roll back and re-raise datastore errors as catalog errors."""
        try:
            yield
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"{action} rejected by the datastore: {e.orig}")
            raise ValidationFailure(
                f"{action} failed: a referenced record does not exist or a constraint was violated"
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"{action} failed: {e}")
            raise InfrastructureFailure(f"{action} failed") from e


class MovieRepository(BaseRepository):
    """Movie queries and writes."""

    # ============ READS ============

    def find_page(self, movie_filter: MovieFilter, page: int, limit: int) -> Page[Movie]:
        """Get one page of movies matching the filter, ordered by id."""
        with self._database_errors("movie query"):
            return fetch_page(
                self.session,
                Movie,
                movie_filter.criteria(),
                page,
                limit,
                options=LIST_LOAD_OPTIONS,
            )

    def find_all(
        self,
        page: int,
        limit: int,
        genre_id: Optional[int] = None,
        director_id: Optional[int] = None,
        min_rating: Optional[float] = None,
    ) -> Page[Movie]:
        movie_filter = MovieFilter(genre_id=genre_id, director_id=director_id, min_rating=min_rating)
        return self.find_page(movie_filter, page, limit)

    def find_by_genre(self, genre_id: int, page: int, limit: int) -> Page[Movie]:
        return self.find_page(MovieFilter(genre_id=genre_id), page, limit)

    def find_by_director(self, director_id: int, page: int, limit: int) -> Page[Movie]:
        return self.find_page(MovieFilter(director_id=director_id), page, limit)

    def find_by_actor(self, actor_id: int, page: int, limit: int) -> Page[Movie]:
        return self.find_page(MovieFilter(actor_id=actor_id), page, limit)

    def search_by_title(self, title: str, page: int, limit: int) -> Page[Movie]:
        return self.find_page(MovieFilter(title=title), page, limit)

    def get_top_rated(self, limit: int) -> List[Movie]:
        """Highest rated movies, ties broken by id."""
        stmt = (
            select(Movie)
            .where(*MovieFilter().criteria())
            .options(*LIST_LOAD_OPTIONS)
            .order_by(Movie.rating.desc(), Movie.id.asc())
            .limit(limit)
        )
        with self._database_errors("top rated query"):
            return list(self.session.scalars(stmt).all())

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        """Get a movie with genre, director, actors and reviews, or None."""
        stmt = (
            select(Movie)
            .where(Movie.id == movie_id, Movie.deleted_at.is_(None))
            .options(*DETAIL_LOAD_OPTIONS)
            .execution_options(populate_existing=True)
        )
        with self._database_errors("movie lookup"):
            return self.session.scalars(stmt).first()

    def exists(self, movie_id: int) -> bool:
        stmt = select(Movie.id).where(Movie.id == movie_id, Movie.deleted_at.is_(None))
        with self._database_errors("movie lookup"):
            return self.session.scalar(stmt) is not None

    def missing_actor_ids(self, actor_ids: Sequence[int]) -> List[int]:
        """Return the ids in actor_ids that have no live actor row."""
        if not actor_ids:
            return []
        stmt = select(Actor.id).where(Actor.id.in_(actor_ids), Actor.deleted_at.is_(None))
        with self._database_errors("actor lookup"):
            found = set(self.session.scalars(stmt).all())
        return [actor_id for actor_id in actor_ids if actor_id not in found]

    # ============ WRITES ============

    def create(self, values: Dict[str, Any], actor_ids: Sequence[int] = ()) -> int:
        """
        Insert a movie and append its actor links in one transaction.

        Returns:
            The new movie id
        """
        with self._database_errors("movie create"):
            movie = Movie(**values)
            self.session.add(movie)
            self.session.flush()
            movie_id = movie.id
            self._append_actors(movie_id, actor_ids)
            self.session.commit()
        logger.info(f"Movie created: id={movie_id} actors={len(actor_ids)}")
        return movie_id

    def update(
        self,
        movie_id: int,
        changes: Dict[str, Any],
        actor_ids: Optional[Sequence[int]] = None,
    ) -> bool:
        """
        Apply a sparse change-set and, if given, replace the actor set.

        Both writes share one transaction.

        Returns:
            False if no live movie has this id
        """
        with self._database_errors("movie update"):
            if changes:
                result = self.session.execute(
                    update(Movie)
                    .where(Movie.id == movie_id, Movie.deleted_at.is_(None))
                    .values(**changes)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    self.session.rollback()
                    return False
            elif not self.exists(movie_id):
                return False

            if actor_ids is not None:
                self._replace_actors(movie_id, actor_ids)
                if not changes:
                    # Membership change alone still counts as a modification
                    self.session.execute(
                        update(Movie)
                        .where(Movie.id == movie_id)
                        .values(updated_at=func.now())
                        .execution_options(synchronize_session=False)
                    )
            self.session.commit()
        logger.info(f"Movie updated: id={movie_id} fields={sorted(changes)}")
        return True

    def soft_delete(self, movie_id: int) -> bool:
        """Mark a movie deleted. Returns False if no live movie has this id."""
        with self._database_errors("movie delete"):
            result = self.session.execute(
                update(Movie)
                .where(Movie.id == movie_id, Movie.deleted_at.is_(None))
                .values(deleted_at=func.now())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.rollback()
                return False
            self.session.commit()
        logger.info(f"Movie deleted: id={movie_id}")
        return True

    def _append_actors(self, movie_id: int, actor_ids: Sequence[int]) -> None:
        """Insert-only membership write."""
        if actor_ids:
            self.session.execute(
                insert(movie_actors),
                [{"movie_id": movie_id, "actor_id": actor_id} for actor_id in actor_ids],
            )

    def _replace_actors(self, movie_id: int, actor_ids: Sequence[int]) -> None:
        """Delete-then-insert membership write."""
        self.session.execute(delete(movie_actors).where(movie_actors.c.movie_id == movie_id))
        self._append_actors(movie_id, actor_ids)


class CatalogRepository(BaseRepository):
    """Create/get/list for the simple catalog entities."""

    def add(self, entity: M) -> M:
        """Insert an entity and return it with its generated fields loaded."""
        name = type(entity).__name__.lower()
        with self._database_errors(f"{name} create"):
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        logger.info(f"{type(entity).__name__} created: id={entity.id}")
        return entity

    def get(self, model: Type[M], entity_id: int, options: Sequence = ()) -> Optional[M]:
        stmt = (
            select(model)
            .where(model.id == entity_id, model.deleted_at.is_(None))
            .options(*options)
        )
        with self._database_errors(f"{model.__name__.lower()} lookup"):
            return self.session.scalars(stmt).first()

    def list_page(
        self,
        model: Type[M],
        page: int,
        limit: int,
        criteria: Sequence = (),
        options: Sequence = (),
    ) -> Page[M]:
        with self._database_errors(f"{model.__name__.lower()} query"):
            return fetch_page(
                self.session,
                model,
                [model.deleted_at.is_(None), *criteria],
                page,
                limit,
                options=options,
            )

    def list_reviews(self, movie_id: int, page: int, limit: int) -> Page[Review]:
        """One page of a movie's reviews, each with its user."""
        return self.list_page(
            Review,
            page,
            limit,
            criteria=[Review.movie_id == movie_id],
            options=[selectinload(Review.user)],
        )
