"""
Database connection and session management for StudyTube.
"""

from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

# Create base class for SQLAlchemy models
Base = declarative_base()

# Session factory; bound to an engine by init_db()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# Type alias for session
DBSession = Session


def create_db_engine(database_url: str) -> Engine:
    """Create an engine, allowing SQLite connections to cross threads."""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args={"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )


def init_db(database_url: str) -> Engine:
    """Bind the session factory to the database and create all tables."""
    from studytube.db.models import Video, Flashcard, Quiz, QuizQuestion  # noqa: F401

    engine = create_db_engine(database_url)
    SessionLocal.configure(bind=engine)
    Base.metadata.create_all(bind=engine)
    return engine


def get_db() -> Generator[Session, None, None]:
    """
    Get a database session.

    This is a dependency that will be used in FastAPI route functions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
