"""
Database manager for the movie catalog.

Handles:
- Engine creation with connection pooling (SQLite or MySQL)
- Session factory for per-request sessions
- Table checks and creation
- Status counts and sample data seeding
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List

from sqlalchemy import create_engine, event, func, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Config
from .errors import InfrastructureFailure
from .models import Actor, Base, Director, Genre, Movie, Review, User, movie_actors
from .seed import seed_sample_data
from .utils import setup_logger


class DatabaseManager:
    """
    Owns the engine and the session factory.

    Responsibilities:
    - Connection management with SQLAlchemy
    - Schema creation
    - Row counts for status reporting
    """

    # Mapped entity per table, in creation order
    TABLE_MODELS = {
        "genres": Genre,
        "directors": Director,
        "actors": Actor,
        "users": User,
        "movies": Movie,
        "reviews": Review,
    }
    REQUIRED_TABLES = list(TABLE_MODELS) + [movie_actors.name]

    def __init__(self, config: Config):
        self.config = config
        self.logger = setup_logger("database", config.log_dir, config.log_level)
        self.engine = self._create_engine()
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def _create_engine(self) -> Engine:
        """Create SQLAlchemy engine with connection pooling."""
        url = self.config.get_db_url()

        if url.startswith("sqlite"):
            in_memory = url in ("sqlite://", "sqlite:///:memory:")
            engine = create_engine(
                url,
                echo=self.config.db_echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool if in_memory else None,
            )
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            return engine

        return create_engine(
            url,
            echo=self.config.db_echo,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    def get_session(self) -> Session:
        """Open a new session. The caller closes it."""
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session for a unit of work: commit on success, roll back on error."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ============ TABLE MANAGEMENT ============

    def get_missing_tables(self) -> List[str]:
        """Get catalog tables that do not exist yet."""
        existing = set(inspect(self.engine).get_table_names())
        return [t for t in self.REQUIRED_TABLES if t not in existing]

    def create_tables(self) -> None:
        """Create any missing catalog tables (existing ones are left alone)."""
        try:
            Base.metadata.create_all(self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            self.logger.error(f"Error creating tables: {e}")
            raise InfrastructureFailure("Could not create catalog tables") from e

    def check_and_create_tables(self) -> Dict[str, List[str]]:
        """
        Create missing tables.

        Returns:
            Dict with "created" and "existing" table names
        """
        missing = self.get_missing_tables()
        if missing:
            self.logger.info(f"Creating tables: {', '.join(missing)}")
            self.create_tables()
        existing = [t for t in self.REQUIRED_TABLES if t not in missing]
        return {"created": missing, "existing": existing}

    # ============ STATUS ============

    def get_status(self) -> Dict[str, int]:
        """Count live (not soft-deleted) rows per table."""
        status = {}
        with self.session_scope() as session:
            for table_name, model in self.TABLE_MODELS.items():
                stmt = select(func.count()).select_from(model).where(model.deleted_at.is_(None))
                status[table_name] = session.scalar(stmt) or 0
            status[movie_actors.name] = (
                session.scalar(select(func.count()).select_from(movie_actors)) or 0
            )
        return status

    def is_empty(self) -> bool:
        """True when no genres exist, the marker used before seeding."""
        with self.session_scope() as session:
            return not session.scalar(
                select(func.count()).select_from(Genre).execution_options(include_deleted=True)
            )

    def seed(self, force: bool = False) -> bool:
        """
        Insert the sample catalog.

        Args:
            force: Seed even when the catalog already has data

        Returns:
            True if data was inserted
        """
        if not force and not self.is_empty():
            self.logger.info("Catalog already has data, skipping seed")
            return False

        with self.session_scope() as session:
            seed_sample_data(session)
        self.logger.info("Database seeded with sample movie data")
        return True


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
