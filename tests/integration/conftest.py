"""
Integration test fixtures. Overrides get_db with an in-memory DB and get_clock with a frozen clock.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pacing.clock import FixedClock


@pytest.fixture
def override_get_db():
    """Create in-memory engine and session factory for API tests."""
    from progress_api.config import Base
    import progress_api.models  # noqa: F401
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def frozen_clock(frozen_now):
    return FixedClock(frozen_now)


@pytest.fixture
def api_client(override_get_db, frozen_clock):
    """FastAPI TestClient with in-memory DB and frozen clock."""
    from fastapi.testclient import TestClient
    from progress_api.api import app
    from progress_api.config import get_clock, get_db
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: frozen_clock
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(api_client):
    """Register and log in a test user; returns bearer headers."""
    api_client.post(
        "/api/v1/user/register",
        json={"name": "Testing User", "email": "testing@example.com", "password": "testing_passw0rd"},
    )
    response = api_client.post(
        "/api/v1/user/login",
        json={"email": "testing@example.com", "password": "testing_passw0rd"},
    )
    assert response.status_code == 200
    return {"Accept": "application/json", "Authorization": f"Bearer {response.json()['token']}"}
