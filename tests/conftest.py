"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from litlink.api.dependencies import get_image_uploader
from litlink.database import Base, get_db
from litlink.main import app
from litlink.services.image_upload import ImageUploadError


class AuthHeaders(dict):
    """Dict subclass that also stores the identity behind the token."""

    def __init__(self, *args, user_id: int | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


class FakeImageUploader:
    """Stands in for ImageKit; records uploads and returns a predictable URL."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.uploads: list[dict] = []

    async def upload(self, file: str, file_name: str, folder: str) -> str:
        if self.fail:
            raise ImageUploadError("upload rejected")
        self.uploads.append({"file": file, "file_name": file_name, "folder": folder})
        return f"https://ik.example.com{folder}/{file_name}"


# Use test database - PostgreSQL if DATABASE_URL is set, SQLite otherwise
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/litlink_test"
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

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


@pytest.fixture
def image_uploader(client):
    """Replace the ImageKit uploader with an in-memory fake."""
    uploader = FakeImageUploader()
    app.dependency_overrides[get_image_uploader] = lambda: uploader
    return uploader


def register_and_login(client, username: str, email: str, password: str = "p1") -> AuthHeaders:
    """Register a user, log in, and return bearer headers for them."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email,
            "password": password,
            "confirmPassword": password,
            "birthday": "2000-01-01",
        },
    )
    assert response.status_code == 201
    user_id = response.json()["user"]["id"]

    response = client.post("/api/auth/login", json={"identifier": username, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, username=username)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "ana", "ana@x.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register_and_login(client, "bob", "bob@x.com")
