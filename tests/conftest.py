"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/artist_accounts", "/artist_accounts_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Settings are cached on first import, so these must be set before importing src
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, build_engine, get_db, init_db  # noqa: E402
from src.main import app  # noqa: E402

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-in user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    init_db(engine)
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


def sign_up_payload(email: str, password: str = PASSWORD, **fields) -> dict:
    return {
        "credentials": {
            "email": email,
            "password": password,
            "password_confirmation": password,
            **fields,
        }
    }


@pytest.fixture
def sign_up(client):
    """Return a helper that signs up a user through the API."""

    def _sign_up(email: str, password: str = PASSWORD, **fields):
        return client.post("/sign-up", json=sign_up_payload(email, password, **fields))

    return _sign_up


@pytest.fixture
def sign_in(client):
    """Return a helper that signs in through the API."""

    def _sign_in(email: str, password: str = PASSWORD):
        return client.post(
            "/sign-in", json={"credentials": {"email": email, "password": password}}
        )

    return _sign_in


@pytest.fixture
def auth_headers(sign_up, sign_in):
    """Sign up and sign in a user, return bearer headers with user info."""
    email = "test@example.com"
    response = sign_up(email, name="Test Artist")
    assert response.status_code == 201

    response = sign_in(email)
    assert response.status_code == 201
    user = response.json()["user"]

    return AuthHeaders(
        {"Authorization": f"Bearer {user['token']}"}, user_id=user["id"], email=email
    )
