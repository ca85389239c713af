"""
Query and filter building for paginated catalog reads.

Filters are optional and combined with AND; an absent filter adds no
constraint. Pagination values are clamped rather than rejected.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .models import Movie, movie_actors

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_TOP_RATED_LIMIT = 10
MAX_TOP_RATED_LIMIT = 50

# Largest row offset a 64-bit datastore integer can hold
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_LIMIT + 1


def clamp_pagination(page: Optional[int], limit: Optional[int]) -> Tuple[int, int]:
    """Clamp page to [1, MAX_PAGE] and limit to [1, MAX_LIMIT], filling defaults."""
    page = DEFAULT_PAGE if page is None else min(max(page, 1), MAX_PAGE)
    limit = DEFAULT_LIMIT if limit is None else min(max(limit, 1), MAX_LIMIT)
    return page, limit


def clamp_top_rated_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_TOP_RATED_LIMIT
    return min(max(limit, 1), MAX_TOP_RATED_LIMIT)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    items: List[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.limit - 1) // self.limit if self.limit > 0 else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


@dataclass
class MovieFilter:
    """Optional movie constraints; None means "no constraint"."""

    genre_id: Optional[int] = None
    director_id: Optional[int] = None
    actor_id: Optional[int] = None
    min_rating: Optional[float] = None
    title: Optional[str] = None

    def criteria(self) -> List:
        """Build the WHERE clauses for this filter."""
        clauses = [Movie.deleted_at.is_(None)]

        if self.genre_id is not None:
            clauses.append(Movie.genre_id == self.genre_id)

        if self.director_id is not None:
            clauses.append(Movie.director_id == self.director_id)

        if self.actor_id is not None:
            # EXISTS keeps one row per movie however many links match
            membership = select(movie_actors.c.movie_id).where(
                movie_actors.c.movie_id == Movie.id,
                movie_actors.c.actor_id == self.actor_id,
            )
            clauses.append(membership.exists())

        if self.min_rating is not None:
            clauses.append(Movie.rating >= self.min_rating)

        if self.title is not None:
            clauses.append(Movie.title.icontains(self.title, autoescape=True))

        return clauses


def fetch_page(
    session: Session,
    entity,
    criteria: Sequence,
    page: int,
    limit: int,
    options: Sequence = (),
    order_by: Optional[Sequence] = None,
) -> Page:
    """
    Run a count query and a page query sharing the same criteria.

    Args:
        session: Active session
        entity: Mapped class to select
        criteria: WHERE clauses, ANDed
        page: Page number (already clamped)
        limit: Page size (already clamped)
        options: Loader options (eager loads)
        order_by: Ordering; defaults to primary key ascending

    Returns:
        Page with items, total count, page and limit
    """
    count_stmt = select(func.count()).select_from(entity).where(*criteria)
    total = session.scalar(count_stmt) or 0
    offset = page_offset(page, limit)
    if offset >= total:
        return Page(items=[], total=total, page=page, limit=limit)

    stmt = (
        select(entity)
        .where(*criteria)
        .options(*options)
        .order_by(*(order_by if order_by is not None else (entity.id.asc(),)))
        .offset(offset)
        .limit(limit)
    )
    items = list(session.scalars(stmt).all())
    return Page(items=items, total=total, page=page, limit=limit)
