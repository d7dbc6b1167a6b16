"""SQLAlchemy engine, session factory and request dependency."""

import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from tournament_site.core.config import get_database_url

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(url: str | None = None) -> Engine:
    """
    Build the engine for DATABASE_URL (or the given url).
    In-memory SQLite shares a single connection so every session sees the same data.
    """
    url = url or get_database_url()
    kwargs: dict = {"pool_pre_ping": True, "echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Dependency that yields a DB session from the app's session factory and closes it."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """
    Create all tables (teams, participants).
    Models are imported first so their metadata is registered.
    """
    from tournament_site.models import participant, team  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completed")
