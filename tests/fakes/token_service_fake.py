"""Fake token service for testing without real JWT implementation.

Tokens are simple strings with a predictable format, so tests can build
and inspect them directly.
"""

from blogapi.domain.services.token_service import (
    ITokenService,
    TokenStatus,
    TokenVerification,
)


class FakeTokenService(ITokenService):
    """
    In-memory fake implementation of ITokenService.

    Token format: "token:<user_id>"

    Usage:
        token_service = FakeTokenService()
        token = token_service.issue("65f0c0ffee")
        # Returns: "token:65f0c0ffee"
    """

    PREFIX = "token:"

    def __init__(self):
        self._expired: set[str] = set()
        self.issued: list[str] = []

    def issue(self, user_id: str) -> str:
        token = f"{self.PREFIX}{user_id}"
        self.issued.append(token)
        return token

    def verify(self, token: str) -> TokenVerification:
        if not token.startswith(self.PREFIX):
            return TokenVerification.failed(TokenStatus.MALFORMED, "not a fake token")

        if token in self._expired:
            return TokenVerification.failed(TokenStatus.EXPIRED, "expired")

        user_id = token[len(self.PREFIX):]
        if not user_id:
            return TokenVerification.failed(TokenStatus.MISSING_CLAIM, "no user id")

        return TokenVerification.valid(user_id)

    # Helper methods for testing

    def expire_token(self, token: str) -> None:
        """Force a token to be expired (useful for testing expiration)."""
        self._expired.add(token)
