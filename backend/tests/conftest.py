"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_auth_service, reset_container
from modules.auth.models import TokenSettings, UserRecord
from modules.auth.password import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenIssuer, TokenVerifier
from modules.auth.exceptions import UserAlreadyExistsError


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


class FakeUserRepository:
    """In-memory stand-in for UserRepository."""

    def __init__(self):
        self.users: dict[str, UserRecord] = {}

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    async def insert(self, name, email, password_hash, avatar=None) -> UserRecord:
        if await self.find_by_email(email) is not None:
            raise UserAlreadyExistsError()
        record = UserRecord(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            avatar=avatar,
            date=datetime.now(timezone.utc),
        )
        self.users[record.id] = record
        return record

    async def delete(self, user_id: str) -> None:
        self.users.pop(user_id, None)


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(secret=TEST_JWT_SECRET, algorithm="HS256", expires_in=3600)


@pytest.fixture
def token_issuer(token_settings: TokenSettings) -> TokenIssuer:
    return TokenIssuer(token_settings)


@pytest.fixture
def token_verifier(token_settings: TokenSettings) -> TokenVerifier:
    return TokenVerifier(token_settings)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """Cheapest bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def auth_service(user_repository, password_hasher, token_issuer, token_verifier) -> AuthService:
    return AuthService(
        users=user_repository,
        hasher=password_hasher,
        issuer=token_issuer,
        verifier=token_verifier,
    )


@pytest.fixture
def app(auth_service):
    """Fresh app whose auth service runs against the in-memory store."""
    from api.app import create_app

    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "8f14e45f-ceea-467f-a0e6-7b1c2b3d4e5f"


@pytest.fixture
def auth_token(token_issuer: TokenIssuer, test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return token_issuer.issue(test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
