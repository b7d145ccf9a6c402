"""Argon2 password hasher implementation using pwdlib.

Dependency flow:
    UserService / AuthService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib is only imported here, so unit tests can swap in a fake hasher and
the algorithm can change without touching the services.
"""

from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from blogapi.domain.services.password_hasher import IPasswordHasher


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using Argon2id via pwdlib.

    Argon2id is salted and memory-hard; its cost parameters (memory, time,
    parallelism) can be tuned upward as hardware improves.

    Usage:
        hasher = Argon2PasswordHasher()
        hashed = hasher.hash("secret1")
        # "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"
        hasher.verify("secret1", hashed)  # True
    """

    def __init__(
        self,
        time_cost: int | None = None,
        memory_cost: int | None = None,
    ):
        """
        Initialize the hasher.

        Args:
            time_cost: Argon2 iterations (pwdlib default when None)
            memory_cost: Argon2 memory in KiB (pwdlib default when None)
        """
        hasher_options = {}
        if time_cost is not None:
            hasher_options["time_cost"] = time_cost
        if memory_cost is not None:
            hasher_options["memory_cost"] = memory_cost

        self._password_hash = PasswordHash((Argon2Hasher(**hasher_options),))

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        Each call generates a fresh salt, so hashing the same password twice
        produces different digests.
        """
        return self._password_hash.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against an Argon2 digest.

        Comparison is constant-time inside argon2. A malformed digest
        verifies as False instead of raising.
        """
        try:
            is_valid, _ = self._password_hash.verify_and_update(
                plain_password, hashed_password
            )
            return is_valid
        except Exception:
            # Unknown or corrupt digest format
            return False
