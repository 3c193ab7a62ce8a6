"""Database connection and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Create an engine for the given URL.

    SQLite connections are shared across the threadpool FastAPI runs sync
    handlers in, so same-thread checking is turned off. Server databases get
    a pre-pinged connection pool.
    """
    if not database_url:
        raise RuntimeError("DATABASE_URL is not configured")

    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,        # Number of connections to maintain
        max_overflow=20,     # Maximum overflow connections
        connect_args={"connect_timeout": 10},
    )


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Register models on Base.metadata before create_all
    from db import models  # noqa: F401

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ensured", extra={"url": target.url.render_as_string(hide_password=True)})
