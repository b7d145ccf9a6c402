"""Token service interface - domain layer abstraction.

Session tokens are stateless: a signed claim set binding a user id. Nothing
is stored server-side, so a token stays valid until its signature stops
verifying (secret rotation) or, when an expiry is configured, until it
expires.

Verification returns a tagged result instead of raising. Every variant other
than VALID means "deny access"; the tag tells the caller why, so a tampered
token is never confused with a server fault.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class TokenStatus(Enum):
    """Outcome of verifying a token."""

    VALID = "valid"
    MALFORMED = "malformed"  # bad signature, not a token, wrong algorithm
    EXPIRED = "expired"
    MISSING_CLAIM = "missing_claim"  # signature fine, no user identifier


@dataclass(frozen=True)
class TokenVerification:
    """
    Domain representation of a verification outcome.

    user_id is set only when status is VALID. detail carries a diagnostic
    message for the failure variants.
    """

    status: TokenStatus
    user_id: str | None = None
    detail: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID

    @classmethod
    def valid(cls, user_id: str) -> "TokenVerification":
        return cls(status=TokenStatus.VALID, user_id=user_id)

    @classmethod
    def failed(cls, status: TokenStatus, detail: str) -> "TokenVerification":
        return cls(status=status, detail=detail)


class ITokenService(ABC):
    """
    Interface for token issuance and verification.

    This abstraction allows the application layer to work with
    authentication tokens without depending on a specific token
    format or library.
    """

    @abstractmethod
    def issue(self, user_id: str) -> str:
        """
        Issue a signed token for a user.

        Args:
            user_id: User's unique identifier

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenVerification:
        """
        Verify a token's signature and structure.

        Args:
            token: Encoded token string

        Returns:
            TokenVerification; never raises for bad input
        """
        pass
