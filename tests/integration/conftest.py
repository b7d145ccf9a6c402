"""Integration test fixtures.

Drives the real FastAPI application (routing, auth gate, validation,
exception handlers, JWT) with the unit of work replaced by the in-memory
fakes, so no MongoDB server is needed.
"""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from blogapi.main import app
from blogapi.presentation.dependencies import get_password_hasher, get_uow_factory
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

SIGNUP_URL = "/api/v1/user/signup"


@pytest.fixture
def test_uow() -> FakeUnitOfWork:
    """One in-memory store shared by every request of a test."""
    return FakeUnitOfWork()


@pytest.fixture
def client(test_uow: FakeUnitOfWork) -> Generator[TestClient]:
    """
    Create a FastAPI test client backed by the in-memory store.

    This client uses the real application but with fake persistence.
    """

    def override_get_uow_factory():
        return lambda: test_uow

    app.dependency_overrides[get_uow_factory] = override_get_uow_factory
    app.dependency_overrides[get_password_hasher] = FakePasswordHasher

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client: TestClient) -> Callable[..., dict]:
    """Sign up a user and return the auth header for them."""

    def _signup(username: str = "ada", email: str = "ada@example.com", **overrides) -> dict:
        payload = {
            "username": username,
            "name": {"first": "Ada", "last": "Lovelace"},
            "password": "secret1",
            "email": email,
            "preferences": ["tech", "music", "art"],
        }
        payload.update(overrides)
        response = client.post(SIGNUP_URL, json=payload)
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _signup
