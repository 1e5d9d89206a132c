"""
Test configuration and fixtures for the shortener.
This centralizes all test setup, making individual tests clean.
"""

import os

# Pin the settings the tests rely on before the app is imported
os.environ["SHORTY_DATABASE_URL"] = "sqlite://"
os.environ["SHORTY_ALPHABET"] = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
os.environ["SHORTY_SALT"] = ""
os.environ["SHORTY_PADDING"] = "3"
os.environ["SHORTY_HOSTNAME"] = ""
os.environ["SHORTY_PASSWORD"] = ""
os.environ["SHORTY_TRACK"] = "true"
os.environ["SHORTY_CACHE_BACKEND"] = "null"
os.environ["SHORTY_STORE_BACKEND"] = "sqlalchemy"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from shorty.cache.strategies import InMemoryCache
from shorty.codec import Alphabet
from shorty.config import DEFAULT_ALPHABET
from shorty.database.connection import Base, get_db
from shorty.dependencies import get_cache
from shorty.services.short_code_strategies import PlainShortCodeStrategy
from shorty.services.url_service import ShortLinkService
from shorty.storage.factory import LinkStoreFactory
from shorty.storage.strategies import InMemoryLinkStore, SQLAlchemyLinkStore

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    
    db = TestingSessionLocal()
    
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database and cache dependencies overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    cache = InMemoryCache()
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


@pytest.fixture
def plain_strategy():
    return PlainShortCodeStrategy(Alphabet(DEFAULT_ALPHABET))


@pytest.fixture
def sql_store(db_session):
    return SQLAlchemyLinkStore(db_session)


@pytest.fixture
def memory_store():
    LinkStoreFactory.clear_instance()
    yield InMemoryLinkStore()
    LinkStoreFactory.clear_instance()


@pytest.fixture
def service(sql_store, plain_strategy):
    """Service over the SQLite store, no cache"""
    return ShortLinkService(store=sql_store, strategy=plain_strategy)


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
