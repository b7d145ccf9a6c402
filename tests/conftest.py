"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher, FakeUnitOfWork, FakeTokenService)
- Tests run fast (no real crypto, no database)
- Tests are isolated (each test gets fresh fakes)
"""

import os

# Settings are read when blogapi.main is imported; no MongoDB is reachable in tests.
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("MONGO_ENSURE_INDEXES", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402

from blogapi.application.services.auth_service import AuthService  # noqa: E402
from blogapi.application.services.blog_service import BlogService  # noqa: E402
from blogapi.application.services.user_service import UserService  # noqa: E402
from blogapi.domain.entities.blog import Blog, Comment, Likes  # noqa: E402
from blogapi.domain.entities.preference import Preference  # noqa: E402
from blogapi.domain.entities.user import PersonName, User  # noqa: E402
from tests.fakes.password_hasher_fake import FakePasswordHasher  # noqa: E402
from tests.fakes.token_service_fake import FakeTokenService  # noqa: E402
from tests.fakes.unit_of_work_fake import FakeUnitOfWork  # noqa: E402

ADA_ID = "665f1c2e9b1e8a3d4c5b6a01"
GRACE_ID = "665f1c2e9b1e8a3d4c5b6a02"
BLOG_ID = "665f1c2e9b1e8a3d4c5b6b01"


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """
    Provide a FakePasswordHasher for tests.

    This fake hasher is fast and predictable, making tests easier to write.
    """
    return FakePasswordHasher()


@pytest.fixture
def fake_token_service() -> FakeTokenService:
    """Provide a FakeTokenService issuing "token:<user_id>" strings."""
    return FakeTokenService()


@pytest.fixture
def sample_user() -> User:
    """
    Create a sample user for testing.

    The password_hash uses the FakePasswordHasher format: "HASHED:secret1"
    """
    return User(
        id=ADA_ID,
        username="ada",
        name=PersonName(first="Ada", last="Lovelace"),
        email="ada@example.com",
        password_hash="HASHED:secret1",
        preferences=[Preference.TECH, Preference.MUSIC, Preference.ART],
    )


@pytest.fixture
def another_user() -> User:
    """Create another sample user for testing."""
    return User(
        id=GRACE_ID,
        username="grace",
        name=PersonName(first="Grace", last="Hopper"),
        email="grace@example.com",
        password_hash="HASHED:compiler",
        preferences=[Preference.SCIENCE, Preference.BOOKS, Preference.TRAVEL],
    )


@pytest.fixture
def sample_blog() -> Blog:
    """A blog by ada, tagged tech, liked by grace, with one comment."""
    return Blog(
        id=BLOG_ID,
        author=ADA_ID,
        title="Analytical engines",
        body="Notes on the machine.",
        tags=[Preference.TECH, Preference.SCIENCE],
        likes=Likes(users=[GRACE_ID]),
        comments=[Comment(user=GRACE_ID, message="Fascinating")],
    )


@pytest.fixture
def fake_uow():
    """
    Provide a fresh FakeUnitOfWork for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_data(sample_user, another_user, sample_blog):
    """
    Provide a FakeUnitOfWork pre-populated with two users and one blog.

    Useful for testing operations on existing data.
    """
    return FakeUnitOfWork(
        initial_users=[sample_user, another_user],
        initial_blogs=[sample_blog],
    )


@pytest.fixture
def auth_service(fake_uow_with_data, fake_token_service, fake_password_hasher):
    """Provide AuthService with fake dependencies."""

    def uow_factory():
        return fake_uow_with_data

    return AuthService(
        uow_factory=uow_factory,
        token_service=fake_token_service,
        password_hasher=fake_password_hasher,
    )


@pytest.fixture
def user_service(fake_uow_with_data):
    """
    Provide a UserService instance with fake dependencies.

    This allows testing the service layer in isolation:
    - No database (FakeUnitOfWork)

    Tests run fast and are fully deterministic.
    """

    def uow_factory():
        return fake_uow_with_data

    return UserService(uow_factory=uow_factory)


@pytest.fixture
def blog_service(fake_uow_with_data):
    """Provide a BlogService backed by the pre-populated fake UoW."""

    def uow_factory():
        return fake_uow_with_data

    return BlogService(uow_factory=uow_factory)
