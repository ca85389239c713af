"""
Typed requests consumed by the catalog services.

Update requests default every field to ``UNSET`` so that "not supplied"
stays distinct from an explicit ``None`` or empty value.
"""

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Dict, List, Optional


class _Unset:
    """Marker for a field that was not supplied."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class MovieCreateRequest:
    """Fields for a new movie. Actor ids are linked in the same transaction."""

    title: str
    release_year: int
    duration: int
    rating: float = 0.0
    description: str = ""
    poster_url: str = ""
    trailer_url: str = ""
    genre_id: Optional[int] = None
    director_id: Optional[int] = None
    actor_ids: List[int] = field(default_factory=list)

    def column_values(self) -> Dict[str, Any]:
        """Values for the movies row (everything except actor ids)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "actor_ids"}


@dataclass
class MovieUpdateRequest:
    """
    Partial update for a movie.

    genre_id / director_id: an id sets the reference, None clears it.
    actor_ids: when supplied, replaces the whole actor set (an empty
    list removes every actor, an explicit None is rejected).
    """

    title: Optional[str] = UNSET
    description: Optional[str] = UNSET
    release_year: Optional[int] = UNSET
    duration: Optional[int] = UNSET
    rating: Optional[float] = UNSET
    poster_url: Optional[str] = UNSET
    trailer_url: Optional[str] = UNSET
    genre_id: Optional[int] = UNSET
    director_id: Optional[int] = UNSET
    actor_ids: Optional[List[int]] = UNSET

    def changes(self) -> Dict[str, Any]:
        """Sparse column change-set: only the fields that were supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "actor_ids" and getattr(self, f.name) is not UNSET
        }

    @property
    def replaces_actors(self) -> bool:
        return self.actor_ids is not UNSET


@dataclass
class GenreCreateRequest:
    name: str
    description: str = ""


@dataclass
class PersonCreateRequest:
    """Director or actor."""

    name: str
    biography: str = ""
    birth_date: Optional[date] = None
    nationality: str = ""


@dataclass
class UserCreateRequest:
    username: str
    email: str


@dataclass
class ReviewCreateRequest:
    user_id: int
    rating: float
    comment: str = ""
