import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Base, enable_sqlite_foreign_keys, get_db
from app import models  # noqa: F401
from main import app as fastapi_app


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no HTTP layer)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite database per test, shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def _override_db(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db


@pytest.fixture()
def client(session_factory):
    _override_db(session_factory)
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def lenient_client(session_factory):
    """Client that returns 500 responses instead of re-raising server errors."""
    _override_db(session_factory)
    try:
        yield TestClient(fastapi_app, raise_server_exceptions=False)
    finally:
        fastapi_app.dependency_overrides.clear()


def register_and_login(client, name="Alice", email="alice@routiner.io", password="s3cret-pass"):
    resp = client.post("/api/register", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]


@pytest.fixture()
def auth_headers(client):
    headers, _ = register_and_login(client)
    return headers


@pytest.fixture()
def other_auth_headers(client):
    headers, _ = register_and_login(client, name="Bob", email="bob@routiner.io", password="hunter2-pass")
    return headers


@pytest.fixture()
def login_as(client):
    """Register a user and return (headers, profile)."""
    def _login_as(**kwargs):
        return register_and_login(client, **kwargs)
    return _login_as
