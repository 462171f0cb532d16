"""
Tests that slow password checks do not hold up other requests.
"""

import asyncio
import threading
import time

import httpx
import pytest

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.password import PasswordHasher

from tests.conftest import TEST_BCRYPT_ROUNDS

SLOW_VERIFY_SECONDS = 0.3


class SlowHasher(PasswordHasher):
    """Hasher whose verify blocks its thread, like a high-cost bcrypt check."""

    def __init__(self):
        super().__init__(rounds=TEST_BCRYPT_ROUNDS)
        self.started = threading.Event()
        self.finished_at = None

    def verify(self, password: str, password_hash: str) -> bool:
        self.started.set()
        time.sleep(SLOW_VERIFY_SECONDS)
        result = super().verify(password, password_hash)
        self.finished_at = time.perf_counter()
        return result


@pytest.fixture
def slow_hasher() -> SlowHasher:
    return SlowHasher()


@pytest.fixture
def slow_app(settings, user_repository, product_repository, slow_hasher, token_service):
    return create_app(
        ServiceContainer(
            settings,
            user_repository=user_repository,
            product_repository=product_repository,
            password_hasher=slow_hasher,
            token_service=token_service,
        )
    )


class TestEventLoopIsFree:
    @pytest.mark.asyncio
    async def test_status_answers_during_login(self, slow_app, slow_hasher):
        """GET / should complete while a login is still checking its password."""
        transport = httpx.ASGITransport(app=slow_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            registered = await client.post(
                "/api/auth/register",
                json={"email": "a@x.com", "password": "secret1"},
            )
            assert registered.status_code == 201

            login = asyncio.create_task(
                client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
            )
            deadline = time.perf_counter() + 5
            while not slow_hasher.started.is_set() and time.perf_counter() < deadline:
                await asyncio.sleep(0.001)
            assert slow_hasher.started.is_set()

            status = await client.get("/")
            status_done_at = time.perf_counter()
            login_response = await login

        assert status.status_code == 200
        assert login_response.status_code == 200
        assert status_done_at < slow_hasher.finished_at
