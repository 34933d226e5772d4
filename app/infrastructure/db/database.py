"""
Database configuration and session management.
"""

import logging
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from app.config import settings


logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False, **kwargs: Any) -> Engine:
    """Create an engine; SQLite connections are shared across request threads."""
    connect_args: Dict[str, Any] = kwargs.pop("connect_args", {})
    if database_url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)

    new_engine = create_engine(database_url, echo=echo, connect_args=connect_args, **kwargs)

    if database_url.startswith("sqlite"):
        # SQLite leaves foreign keys unenforced unless asked per connection
        @event.listens_for(new_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# Create SQLAlchemy engine
engine = build_engine(settings.database_url, echo=settings.database_echo)

# Create SessionLocal class
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Create declarative base
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    One session per request, always closed.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_all_tables(bind: Engine = engine) -> None:
    """Create any missing tables from the ORM metadata."""
    # Register the models on Base.metadata
    from app.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables verified")


def check_database_connection(session: Session) -> bool:
    """Run a trivial query to check that the database answers."""
    try:
        session.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database connectivity check failed")
        return False
