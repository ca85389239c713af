"""
ORM entity model for the movie catalog.

Every entity carries creation/update timestamps and a soft-delete
marker. Reads never see soft-deleted rows (including eager-loaded
relations) unless a statement is executed with the
``include_deleted`` execution option.
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    event,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    with_loader_criteria,
)


class Base(DeclarativeBase):
    """Declarative base for all catalog tables."""


class SoftDeleteMixin:
    """Identity, timestamps and the soft-delete marker shared by all entities."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


# Composite primary key keeps each (movie, actor) pair unique
movie_actors = Table(
    "movie_actors",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id"), primary_key=True),
    Column("actor_id", Integer, ForeignKey("actors.id"), primary_key=True),
)


class Genre(SoftDeleteMixin, Base):
    __tablename__ = "genres"

    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(Text, default="")

    movies: Mapped[List["Movie"]] = relationship(back_populates="genre")

    def __repr__(self) -> str:
        return f"<Genre {self.id} {self.name!r}>"


class Director(SoftDeleteMixin, Base):
    __tablename__ = "directors"

    name: Mapped[str] = mapped_column(String(200))
    biography: Mapped[str] = mapped_column(Text, default="")
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    nationality: Mapped[str] = mapped_column(String(100), default="")

    movies: Mapped[List["Movie"]] = relationship(back_populates="director")

    def __repr__(self) -> str:
        return f"<Director {self.id} {self.name!r}>"


class Actor(SoftDeleteMixin, Base):
    __tablename__ = "actors"

    name: Mapped[str] = mapped_column(String(200))
    biography: Mapped[str] = mapped_column(Text, default="")
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    nationality: Mapped[str] = mapped_column(String(100), default="")

    movies: Mapped[List["Movie"]] = relationship(secondary=movie_actors, back_populates="actors")

    def __repr__(self) -> str:
        return f"<Actor {self.id} {self.name!r}>"


class User(SoftDeleteMixin, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255))

    reviews: Mapped[List["Review"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username!r}>"


class Movie(SoftDeleteMixin, Base):
    __tablename__ = "movies"

    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default="")
    release_year: Mapped[int] = mapped_column(Integer)
    duration: Mapped[int] = mapped_column(Integer)  # minutes
    rating: Mapped[float] = mapped_column(Float, default=0.0, index=True)
    poster_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True, default="")
    trailer_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True, default="")
    genre_id: Mapped[Optional[int]] = mapped_column(ForeignKey("genres.id"), nullable=True, index=True)
    director_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("directors.id"), nullable=True, index=True
    )

    genre: Mapped[Optional[Genre]] = relationship(back_populates="movies")
    director: Mapped[Optional[Director]] = relationship(back_populates="movies")
    # Membership rows are written explicitly by the repository
    actors: Mapped[List[Actor]] = relationship(
        secondary=movie_actors, back_populates="movies", order_by=Actor.id
    )
    reviews: Mapped[List["Review"]] = relationship(back_populates="movie", order_by="Review.id")

    def __repr__(self) -> str:
        return f"<Movie {self.id} {self.title!r}>"


class Review(SoftDeleteMixin, Base):
    __tablename__ = "reviews"

    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    rating: Mapped[float] = mapped_column(Float)
    comment: Mapped[str] = mapped_column(Text, default="")

    movie: Mapped[Movie] = relationship(back_populates="reviews")
    user: Mapped[User] = relationship(back_populates="reviews")

    def __repr__(self) -> str:
        return f"<Review {self.id} movie={self.movie_id} user={self.user_id}>"


@event.listens_for(Session, "do_orm_execute")
def _exclude_soft_deleted(execute_state) -> None:
    """Hide soft-deleted rows from ORM selects and the relations they load."""
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.deleted_at.is_(None),
                include_aliases=True,
            )
        )
