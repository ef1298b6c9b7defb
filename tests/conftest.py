# File: tests/conftest.py

"""
Shared fixtures.

Each test gets its own SQLite file under tmp_path, wired into the app by
overriding the get_db dependency. The app's lifespan is not entered, so
the default database is never touched.
"""

import os

# Must be set before anything under app/ reads Settings
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.db.init_db import init_db
from app.db.session import build_engine
from app.main import app


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Sign a user up and return Authorization headers for them."""

    def _signup(email: str = "alice@example.com", password: str = "123") -> dict[str, str]:
        resp = client.post("/auth/signup", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _signup


@pytest.fixture
def auth_headers(signup):
    return signup()
