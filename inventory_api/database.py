from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from inventory_api.config import Settings

# Base class for models
Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine with a fixed-size connection pool.

    Requests beyond POOL_SIZE wait for a free connection (no overflow).
    With POOL_TIMEOUT unset the wait has no limit.
    """
    return create_engine(
        settings.DATABASE_URL,
        pool_size=settings.POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the given engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """
    Dependency to get database session.
    Yields a session from the application's session factory and closes it after use.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
