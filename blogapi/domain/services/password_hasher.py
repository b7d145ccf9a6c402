"""Password hashing interface - domain service abstraction.

Password hashing belongs to the domain because storing only a digest is a
business requirement: a password is hashed at signup and checked at login,
and the plain text is never persisted or returned.

The domain does NOT care which algorithm or library is used; it only needs
two guarantees:
1. Hashing the same password twice yields different digests (fresh salt)
2. Verification recomputes with the salt embedded in the digest
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations must use a salted, deliberately slow algorithm with a
    tunable cost factor.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Self-describing digest string (algorithm, parameters, salt, hash)

        Raises:
            Any error from the underlying primitive; callers treat it as an
            internal failure.
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a stored digest.

        Never raises for a mismatched or malformed digest - returns False.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise
        """
        pass
