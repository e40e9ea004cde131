"""
Database engine, session factory and declarative base.
"""

import uuid
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import settings


def _connect_args(database_url: str) -> dict:
    # SQLite connections are used from FastAPI's threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    pool_pre_ping=True,
    echo=settings.DATABASE_ECHO,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def generate_uuid() -> str:
    """Primary keys are UUID strings, unique across every table."""
    return str(uuid.uuid4())


def get_db() -> Generator[Session, None, None]:
    """
    Dependency: yield a database session for one request.
    The session is always closed, even if the request fails.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables that do not exist yet."""
    # Models must be imported so they register on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
