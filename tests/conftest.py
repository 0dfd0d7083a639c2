"""
Shared fixtures: in-memory SQLite database, metrics registry with a
controllable clock, and a TestClient bound to a freshly built app.
"""
import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings, S3Settings, Environment
from app.core.db import Database
from app.core.metrics import MetricsRegistry
from app.main import create_app


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def metrics(clock):
    return MetricsRegistry(clock=clock)


@pytest.fixture
def settings():
    return Settings(
        app_version="2.3.4",
        environment=Environment.TESTING,
        node_env=None,
        database_url="sqlite://",
        log_format="text",
        s3=S3Settings(bucket_url="https://cdn.example.com"),
    )


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings, database, metrics):
    return create_app(settings=settings, database=database, metrics=metrics)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
