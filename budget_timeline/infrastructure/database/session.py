"""Read-only database sessions for loading payment records"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from budget_timeline.config import Settings, settings


def build_engine(config: Settings) -> Engine:
    """
    Create the engine for the analytics relations.

    Pool sizing comes from settings; SQLite URLs (local runs, tests) get
    SQLAlchemy's default pool since they take no sizing arguments.
    """
    if config.database_url.startswith("sqlite"):
        return create_engine(config.database_url, connect_args={"check_same_thread": False})

    return create_engine(
        config.database_url,
        pool_pre_ping=True,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_recycle=config.db_pool_recycle_seconds,
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
