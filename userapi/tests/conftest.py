"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from fastapi.testclient import TestClient

from userapi.config import Settings
from userapi.models.domain import SEED_USERS
from userapi.models.dto import UserPayload
from userapi.repositories.user_repository import UserRepository
from userapi.server import create_app
from userapi.services.user_service import UserService

TEST_TOKEN = "test-secret"


@pytest.fixture
def user_repo():
    """Repository seeded with the standard three users."""
    return UserRepository(seed=SEED_USERS)


@pytest.fixture
def user_service(user_repo):
    """Service over the seeded repository."""
    return UserService(user_repo)


@pytest.fixture
def valid_payload():
    """A payload that passes every validation rule."""
    return UserPayload(
        username="dana",
        email="dana@example.com",
        age=28,
        password="hunter22",
    )


@pytest.fixture
def settings():
    """Settings with a known shared secret."""
    return Settings(auth_token=TEST_TOKEN, environment="production")


@pytest.fixture
def auth_headers():
    """Headers carrying the test shared secret."""
    return {"Authorization": TEST_TOKEN}


@pytest.fixture
def client(settings, user_repo):
    """Test client over a fresh app and repository."""
    return TestClient(create_app(settings=settings, user_repo=user_repo))
