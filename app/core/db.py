from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Generator, Optional

from fastapi import Request

# SQLAlchemy declarative base for models
Base = declarative_base()


class Database:
    """Engine plus session factory, built once and passed to whoever needs a session."""

    def __init__(self, url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.url = url
        if engine is None:
            engine = create_engine(url, echo=echo, future=True, **_engine_options(url))
        self.engine = engine
        self.SessionLocal = sessionmaker(
            bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def create_all(self) -> None:
        # importing the models registers their tables on Base.metadata
        import app.models  # noqa: F401
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            # one shared connection, otherwise every session sees an empty database
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
