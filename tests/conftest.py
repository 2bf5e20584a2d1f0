"""Shared fixtures.

The app is pointed at a private in-memory SQLite database before any
``homeplanner`` module is imported; each test gets a freshly created schema.
"""

from __future__ import annotations

import os

os.environ["HOMEPLANNER_DATABASE_URL"] = "sqlite://"
os.environ.setdefault("HOMEPLANNER_JWT_SECRET", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from homeplanner.db.session import SessionLocal, engine  # noqa: E402
from homeplanner.main import app  # noqa: E402
from homeplanner.models import Base  # noqa: E402


@pytest.fixture()
def db_engine():
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture()
def db_session(db_engine):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_engine):
    with TestClient(app) as c:
        yield c


def register_and_login(client: TestClient, email: str = "owner@example.com", password: str = "secret123") -> dict:
    resp = client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture()
def auth_headers(client):
    return register_and_login(client)
