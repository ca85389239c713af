"""
Shared fixtures for movie catalog tests.

Provides an in-memory database, sessions, services, sample data and a
FastAPI test client wired to the in-memory database.
"""

import pytest

from fastapi.testclient import TestClient

from movie_catalog.config import Config
from movie_catalog.database import DatabaseManager
from movie_catalog.models import Actor
from movie_catalog.requests import MovieCreateRequest
from movie_catalog.service import CatalogService, MovieService


# =============================================================================
# SAMPLE DATA
# =============================================================================

def make_movie_request(**overrides) -> MovieCreateRequest:
    """Create a valid MovieCreateRequest for testing."""
    values = {
        "title": "Arrival",
        "release_year": 2016,
        "duration": 116,
        "rating": 7.9,
        "description": "A linguist works with the military to communicate with alien lifeforms.",
    }
    values.update(overrides)
    return MovieCreateRequest(**values)


@pytest.fixture
def movie_request():
    """Factory for valid movie create requests."""
    return make_movie_request


# =============================================================================
# DATABASE
# =============================================================================

@pytest.fixture
def config(tmp_path):
    """Config pointing at a private in-memory SQLite database."""
    return Config(database_url="sqlite://", log_dir=tmp_path / "logs")


@pytest.fixture
def db(config):
    """Fresh in-memory database with all tables created."""
    manager = DatabaseManager(config)
    manager.create_tables()
    yield manager
    manager.engine.dispose()


@pytest.fixture
def seeded_db(db):
    """Database holding the sample catalog."""
    db.seed()
    return db


@pytest.fixture
def session(db):
    """Session on the empty database."""
    session = db.get_session()
    yield session
    session.close()


@pytest.fixture
def seeded_session(seeded_db):
    """Session on the sample catalog."""
    session = seeded_db.get_session()
    yield session
    session.close()


# =============================================================================
# SERVICES
# =============================================================================

@pytest.fixture
def movie_service(seeded_session):
    return MovieService(seeded_session)


@pytest.fixture
def catalog_service(seeded_session):
    return CatalogService(seeded_session)


@pytest.fixture
def extra_actor(seeded_session):
    """A fifth actor with no movies."""
    actor = Actor(name="Cillian Murphy", nationality="Irish")
    seeded_session.add(actor)
    seeded_session.commit()
    return actor


# =============================================================================
# API
# =============================================================================

@pytest.fixture
def api_client(seeded_db):
    """Provide FastAPI test client backed by the seeded in-memory database."""
    from api.main import app
    from api import dependencies

    # Clear any cached config/db from previous runs
    dependencies.get_config.cache_clear()
    dependencies.get_db.cache_clear()

    app.dependency_overrides[dependencies.get_db] = lambda: seeded_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
