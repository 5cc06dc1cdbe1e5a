"""
Fixtures compartilhadas: app com SQLite em memória já semeado
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import Base
from app.main import create_app
from app.seed import seed_fixed_extensions


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        JSON_LOGS=False,
        LOG_LEVEL="WARNING",
        RATE_LIMIT="10000/minute",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.engine)

    session = app.state.session_factory()
    try:
        seed_fixed_extensions(session)
    finally:
        session.close()

    yield app
    app.state.engine.dispose()


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
