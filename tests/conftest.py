"""
Shared fixtures: a fresh in-memory database per test and HTTP clients.
"""
import os

# Must be set before roster_api reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from roster_api.core.config import settings
from roster_api.db.base import Base
from roster_api.db.init_db import init_db
from roster_api.db.session import SessionLocal, engine
from roster_api.main import app

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


@pytest.fixture(autouse=True)
def reset_database():
    """Drop every table and reload the seed roster."""
    Base.metadata.drop_all(bind=engine)
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    """A client holding a logged-in admin session cookie."""
    response = client.post("/api/auth/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200, response.text
    assert settings.SESSION_COOKIE_NAME in client.cookies
    return client
