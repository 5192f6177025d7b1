"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.api.dependencies import get_clock
from app.db.database import get_db
from app.db.models import Base
from app.store import MemoryKeyValueBackend, RecordStore


FIXED_NOW = datetime(2026, 3, 14, 9, 30)


# Create a shared test database engine
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def fixed_clock():
    return FIXED_NOW


# Override the dependencies globally for all tests
app.dependency_overrides[get_db] = override_get_db
app.dependency_overrides[get_clock] = lambda: fixed_clock


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop after."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Create database session for test setup."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def memory_store():
    """Record store over an empty in-memory backend."""
    return RecordStore(MemoryKeyValueBackend())
