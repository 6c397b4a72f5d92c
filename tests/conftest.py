import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.config import Settings
from inventory_api.database import Base
from inventory_api.main import create_app
from inventory_api.models.product import Product


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


def _make_settings(**overrides):
    values = {
        "DATABASE_URL": SQLALCHEMY_DATABASE_URL,
        "ENVIRONMENT": "development",
        "STRICT_STARTUP": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_settings():
    """Factory for test settings pointing at the in-memory database."""
    return _make_settings


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database shared by every connection of one test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """Create database session for direct database access in tests."""
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    yield session

    session.close()


@pytest.fixture(scope="function")
def client(engine):
    """Test client whose startup created and seeded the products table."""
    app = create_app(settings=_make_settings(), engine=engine)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def empty_client(client, engine):
    """Test client with the seed rows removed."""
    with engine.begin() as conn:
        conn.execute(delete(Product))
    return client
