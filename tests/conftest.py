"""Shared fixtures for StoryQuest API tests."""

import os

# Must be set before storyquest.config is imported
os.environ["LLM_PROVIDER"] = "mock"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storyquest.app import create_app
from storyquest.business.models import Base
from storyquest.shared.services.orm_service import get_db
from storyquest.shared.services.feature_flags_service import FeatureFlagService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    application = create_app(feature_flags=FeatureFlagService(environ={}))
    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


def register(client, username="hero", email="hero@example.com", password="secret123"):
    resp = client.post("/api/auth/register", json={
        "username": username,
        "email": email,
        "password": password,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(client):
    return register(client)


@pytest.fixture
def auth_headers(user):
    return bearer(user["token"])


@pytest.fixture
def other_headers(client):
    other = register(client, username="rival", email="rival@example.com")
    return bearer(other["token"])


@pytest.fixture
def campaign(client, auth_headers):
    resp = client.post("/api/campaigns", headers=auth_headers, json={
        "name": "Shadows of Emberfall",
        "description": "A kingdom on the brink of war",
        "theme": "medieval-fantasy",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def character(client, auth_headers, campaign):
    resp = client.post("/api/characters", headers=auth_headers, json={
        "name": "Lyra",
        "class": "Ranger",
        "race": "Elf",
        "campaign_id": campaign["id"],
        "backstory": "Raised in the Whisperwood",
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def item(client, auth_headers, campaign):
    resp = client.post("/api/items", headers=auth_headers, json={
        "name": "Elven Bow",
        "description": "A longbow carved from silverwood",
        "type": "weapon",
        "campaign_id": campaign["id"],
        "properties": {"damage": "1d8"},
    })
    assert resp.status_code == 201, resp.text
    return resp.json()
