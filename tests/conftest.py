"""
Shared pytest fixtures for userhub tests.

Each test gets its own application wired to a fresh in-memory SQLite
database, a fixed signing secret and the cheapest bcrypt cost.
"""

import pytest
from fastapi.testclient import TestClient

from userhub.core.config import Settings
from userhub.core.security import PasswordHasher, TokenIssuer, TokenVerifier
from userhub.main import create_application

TEST_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite://",
        "jwt_secret": TEST_SECRET,
        "password_hash_rounds": 4,
        "backend_cors_origins": [],
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(TEST_SECRET)


@pytest.fixture
def user_payload() -> dict:
    return {
        "name": "Ada Lovelace",
        "email": "ada@bar.com",
        "image": "https://cdn.bar.com/ada.png",
        "address": "12 St James's Square, London",
        "phoneNumber": "+44 20 7946 0000",
        "password": "analytical-engine",
        "userSkills": ["mathematics", "programming"],
        "pricePerHour": 120.5,
    }


@pytest.fixture
def registered(client, user_payload) -> dict:
    """Register ``user_payload`` and return ``{"token": ..., "id": ...}``."""
    resp = client.post("/register", json=user_payload)
    assert resp.status_code == 201, resp.text
    token = resp.json()["authToken"]
    user_id = TokenVerifier(TEST_SECRET).verify(token).subject_id
    return {"token": token, "id": user_id}
