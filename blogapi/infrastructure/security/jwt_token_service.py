"""JWT token service implementation using PyJWT.

Dependency flow:
    AuthService (application) → ITokenService (domain) ← JWTTokenService (infrastructure)

Tokens are HS256-signed JWTs:
- sub: user id
- iat: issued-at
- jti: unique token id (makes two tokens for the same user distinct)
- exp: only when an expiry is configured

Verification never raises. PyJWT's exception hierarchy is folded into the
TokenVerification tags so the authentication gate can answer 401 for every
failure.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from blogapi.domain.services.token_service import (
    ITokenService,
    TokenStatus,
    TokenVerification,
)

logger = logging.getLogger(__name__)


class JWTTokenService(ITokenService):
    """
    Production token service using JWT via PyJWT.

    Security Considerations:
    - Secret key must be at least 32 characters (also enforced in Settings)
    - Only the configured algorithm is accepted on decode, which rules out
      "alg: none" tokens
    - Without access_token_expire_minutes tokens carry no exp claim and stay
      valid until the secret is rotated
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: Optional[int] = None,
    ):
        """
        Initialize JWT token service.

        Args:
            secret_key: Secret key for signing tokens (min 32 characters)
            algorithm: JWT signing algorithm (default: HS256)
            access_token_expire_minutes: Token lifetime; None disables expiry

        Raises:
            ValueError: If secret_key is too short
        """
        if len(secret_key) < 32:
            raise ValueError("Secret key must be at least 32 characters long")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_token_expire_minutes = access_token_expire_minutes

    def issue(self, user_id: str) -> str:
        """
        Issue a signed JWT for a user.

        Example:
            >>> service = JWTTokenService(secret_key="x" * 32)
            >>> token = service.issue("665f1c2e9b1e8a3d4c5b6a79")
            >>> token.count(".")
            2
        """
        now = datetime.now(timezone.utc)

        payload = {
            "sub": str(user_id),
            "iat": now,
            "jti": str(uuid.uuid4()),
        }
        if self._access_token_expire_minutes is not None:
            payload["exp"] = now + timedelta(minutes=self._access_token_expire_minutes)

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenVerification:
        """
        Verify signature and structure of a JWT.

        Returns:
            VALID with the user id, or MALFORMED / EXPIRED / MISSING_CLAIM
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except ExpiredSignatureError as exc:
            return TokenVerification.failed(TokenStatus.EXPIRED, str(exc))
        except InvalidTokenError as exc:
            logger.debug(f"Rejected malformed token: {exc}")
            return TokenVerification.failed(TokenStatus.MALFORMED, str(exc))

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return TokenVerification.failed(
                TokenStatus.MISSING_CLAIM, "Token does not carry a user identifier"
            )

        return TokenVerification.valid(user_id)
