"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached; configure before the app is imported.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from taskmanager.database import Base, get_db  # noqa: E402
from taskmanager.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]
if "postgresql" in SQLALCHEMY_DATABASE_URL:
    # Running in Docker - use a separate PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = SQLALCHEMY_DATABASE_URL.replace("/task_manager", "/task_manager_test")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_user(client, email: str, password: str = "testpass123", name: str = "Test User"):
    """Register a user and return auth headers for them."""
    response = client.post(
        "/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_user(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register_user(client, "other@example.com", name="Other User")
