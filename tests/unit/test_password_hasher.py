"""Unit tests for password hashers.

The real Argon2 hasher runs with reduced cost parameters so the tests stay
fast; the digest format and salting behaviour are the same.
"""

import pytest

from blogapi.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from tests.fakes.password_hasher_fake import FakePasswordHasher

pytestmark = pytest.mark.unit


@pytest.fixture(scope="module")
def argon2_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=1024)


class TestArgon2PasswordHasher:
    """Test the production Argon2 implementation."""

    def test_hash_produces_argon2id_digest(self, argon2_hasher):
        # Act
        digest = argon2_hasher.hash("secret1")

        # Assert
        assert digest.startswith("$argon2id$")
        assert "secret1" not in digest

    def test_same_password_hashes_differently(self, argon2_hasher):
        """Each hash gets a fresh salt."""
        # Act
        first = argon2_hasher.hash("secret1")
        second = argon2_hasher.hash("secret1")

        # Assert
        assert first != second
        assert argon2_hasher.verify("secret1", first)
        assert argon2_hasher.verify("secret1", second)

    def test_verify_correct_password(self, argon2_hasher):
        digest = argon2_hasher.hash("secret1")

        assert argon2_hasher.verify("secret1", digest) is True

    def test_verify_wrong_password(self, argon2_hasher):
        digest = argon2_hasher.hash("secret1")

        assert argon2_hasher.verify("secret2", digest) is False

    @pytest.mark.parametrize("digest", ["", "not-a-digest", "$argon2id$broken"])
    def test_verify_malformed_digest_returns_false(self, argon2_hasher, digest):
        """A corrupt digest is a mismatch, never an exception."""
        assert argon2_hasher.verify("secret1", digest) is False


class TestFakePasswordHasher:
    """The fake must honour the same contract the services rely on."""

    def test_hash_adds_prefix(self):
        hasher = FakePasswordHasher()

        assert hasher.hash("secret1") == "HASHED:secret1"
        assert hasher.hashed == ["secret1"]

    def test_verify_round_trip(self):
        hasher = FakePasswordHasher()
        digest = hasher.hash("secret1")

        assert hasher.verify("secret1", digest) is True
        assert hasher.verify("wrong", digest) is False

    def test_verify_invalid_hash_format(self):
        assert FakePasswordHasher().verify("secret1", "secret1") is False
