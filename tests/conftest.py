import os
import tempfile

# Point the module-level app at throwaway storage before anything imports it
_SCRATCH_DIR = tempfile.mkdtemp(prefix="brainvault-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_SCRATCH_DIR, 'import.db')}")
os.environ.setdefault("UPLOAD_DIR", os.path.join(_SCRATCH_DIR, "uploads"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from config import Config
from main import create_app


# --- Test Data Constants ---
class TestConstants:
    """Centralized test constants for consistency."""

    DEFAULT_PASSWORD = "correct-horse"
    SECRET_KEY = "test-secret-key"
    FRONTEND_URL = "http://frontend.test"


@pytest.fixture()
def test_config(tmp_path):
    """
    Function-scoped configuration with its own database file and upload directory.
    """

    class TestConfig(Config):
        DATABASE_URL = f"sqlite:///{tmp_path / 'test.db'}"
        UPLOAD_DIR = str(tmp_path / "uploads")
        SECRET_KEY = TestConstants.SECRET_KEY
        FRONTEND_URL = TestConstants.FRONTEND_URL
        CORS_ORIGINS = ["*"]

    return TestConfig


@pytest.fixture()
def app(test_config):
    """
    Fresh application per test, so every test starts with empty tables.
    """
    fastapi_app = create_app(test_config)
    yield fastapi_app
    fastapi_app.state.database.dispose()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session(app):
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


# --- Helper Functions ---
def signup(client, username, password=TestConstants.DEFAULT_PASSWORD):
    return client.post("/api/v1/signup", json={"username": username, "password": password})


def signin(client, username, password=TestConstants.DEFAULT_PASSWORD):
    return client.post("/api/v1/signin", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_user(client):
    """
    Factory fixture: signs a new user up and in, returns their auth headers.
    """

    def _make_user(username, password=TestConstants.DEFAULT_PASSWORD):
        assert signup(client, username, password).status_code == 201
        response = signin(client, username, password)
        assert response.status_code == 200, response.text
        return bearer(response.json()["token"])

    return _make_user


@pytest.fixture()
def auth_headers(make_user):
    return make_user("alice")
