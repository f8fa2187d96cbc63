"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator, List, Optional, Tuple
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from registration_gateway.api.main import create_app
from registration_gateway.api.dependencies import get_credit_service
from registration_gateway.infrastructure.database.models import Base
from registration_gateway.infrastructure.database.session import get_db
from registration_gateway.infrastructure.memory import InMemoryClientDirectory, InMemoryUserStore
from registration_gateway.domain.interfaces import CreditLimitService


# Test database: one shared in-memory connection per engine
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed evaluation date for age checks
TODAY = date(2024, 6, 15)


class FakeCreditService(CreditLimitService):
    """Credit service double recording every call"""

    def __init__(self, limit: int = 1000, error: Optional[Exception] = None):
        self.limit = limit
        self.error = error
        self.calls: List[Tuple[str, str, date]] = []

    def get_credit_limit(self, firstname: str, surname: str, date_of_birth: date) -> int:
        self.calls.append((firstname, surname, date_of_birth))
        if self.error is not None:
            raise self.error
        return self.limit


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def credit_service() -> FakeCreditService:
    return FakeCreditService()


@pytest.fixture
def client(db: Session, credit_service: FakeCreditService) -> TestClient:
    """Create FastAPI test client with test database and fake credit service"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_credit_service] = lambda: credit_service
    return TestClient(app)


@pytest.fixture
def client_directory() -> InMemoryClientDirectory:
    """Directory pre-loaded with one client per tier"""
    directory = InMemoryClientDirectory()
    directory.create_client(1, "Default")
    directory.create_client(2, "ImportantClient")
    directory.create_client(3, "VeryImportantClient")
    return directory


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()
