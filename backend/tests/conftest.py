"""
Shared test fixtures and utilities.

The app under test is built around in-memory repositories, a fast
password hasher and a token service driven by a fake clock.
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.password import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.products.service import ProductService
from shared.config import Settings
from shared.models import AuthenticatedUser

from tests.fakes import FakeClock, InMemoryProductRepository, InMemoryUserRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest cost bcrypt accepts; keeps the suite fast.
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_service(clock: FakeClock) -> TokenService:
    return TokenService(TEST_JWT_SECRET, clock=clock)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def auth_service(user_repository, hasher, token_service) -> AuthService:
    return AuthService(users=user_repository, hasher=hasher, tokens=token_service)


@pytest.fixture
def product_service(product_repository) -> ProductService:
    return ProductService(product_repository)


@pytest.fixture
def actor() -> AuthenticatedUser:
    return AuthenticatedUser(id=1, email="admin@example.com", name="Admin")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
    )


@pytest.fixture
def container(settings, user_repository, product_repository, hasher, token_service) -> ServiceContainer:
    return ServiceContainer(
        settings,
        user_repository=user_repository,
        product_repository=product_repository,
        password_hasher=hasher,
        token_service=token_service,
    )


@pytest.fixture
def app(container):
    """Create a fresh app for each test."""
    return create_app(container)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def registered_user(client: TestClient) -> dict:
    """Register a@x.com through the API and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={"email": "a@x.com", "password": "secret1", "name": "Ana"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user: dict) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {registered_user['token']}"}
