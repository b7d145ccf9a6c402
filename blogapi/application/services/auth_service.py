"""Authentication service - application layer business logic.

This service orchestrates authentication use cases:
1. Signup (uniqueness check + password hashing + token issuance)
2. Login (credential validation + token issuance)
3. Authenticate (turn an Authorization header into a user id)

DEPENDENCY INVERSION in action:
- AuthService depends on ITokenService, IPasswordHasher and IUnitOfWork
- No dependencies on PyJWT, pwdlib or motor
"""

import logging
import re
from collections.abc import Callable

from blogapi.application.dtos.auth_dto import LoginDTO, TokenDTO
from blogapi.application.dtos.user_dto import CreateUserDTO
from blogapi.application.exceptions.exceptions import (
    InvalidAuthorizationHeaderError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from blogapi.domain.entities.user import PersonName, User
from blogapi.domain.repositories.unit_of_work import IUnitOfWork
from blogapi.domain.services.password_hasher import IPasswordHasher
from blogapi.domain.services.token_service import ITokenService, TokenStatus

logger = logging.getLogger(__name__)

BEARER_PATTERN = re.compile(r"^Bearer (.+)$")


class AuthService:
    """
    Authentication service encapsulating auth-related use cases.

    This service:
    1. Depends on abstractions (ITokenService, IPasswordHasher, IUnitOfWork)
    2. Contains authentication business logic
    3. Returns DTOs to the presentation layer
    4. Raises application exceptions (converted to HTTP by presentation)

    Testing:
    - Unit tests use FakeTokenService, FakePasswordHasher, FakeUnitOfWork
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize auth service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            token_service: Token issuance/verification service (abstraction)
            password_hasher: Password hashing service (abstraction)
        """
        self._uow_factory = uow_factory
        self._token_service = token_service
        self._password_hasher = password_hasher

    async def signup(self, dto: CreateUserDTO) -> TokenDTO:
        """
        Register a user and issue their first token.

        Business rules:
        1. Username and email must both be unused
        2. Password is hashed before storage

        Raises:
            UserAlreadyExistsError: naming the field that collided
                (username is reported when both collide)
        """
        async with self._uow_factory() as uow:
            existing = await uow.users.find_by_username_or_email(dto.username, dto.email)
            if existing is not None:
                field = "username" if existing.username == dto.username else "email"
                logger.info(f"Signup rejected: {field} already in use")
                raise UserAlreadyExistsError(field)

            user = User(
                username=dto.username,
                name=PersonName(first=dto.name.first, last=dto.name.last),
                email=dto.email,
                password_hash=self._password_hasher.hash(dto.password),
                preferences=dto.preferences,
            )
            created_user = await uow.users.add(user)

        assert created_user.id is not None
        logger.info(f"User {created_user.id} signed up")
        return TokenDTO(
            token=self._token_service.issue(created_user.id),
            user_id=created_user.id,
        )

    async def login(self, dto: LoginDTO) -> TokenDTO:
        """
        Authenticate user and issue a token.

        Unlike a hardened login, an unknown email and a wrong password are
        reported differently (404 vs 401).

        Raises:
            UserNotFoundError: If no user has this email
            InvalidCredentialsError: If the password is wrong
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(dto.email)

        if user is None:
            raise UserNotFoundError("Incorrect email address")

        if not self._password_hasher.verify(dto.password, user.password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        assert user.id is not None
        return TokenDTO(token=self._token_service.issue(user.id), user_id=user.id)

    def authenticate(self, authorization: str | None) -> str:
        """
        Resolve an Authorization header to a user id.

        States, in order:
        1. No header → MissingTokenError (401)
        2. Not "Bearer <token>" → InvalidAuthorizationHeaderError (400)
        3. Token verification:
           - valid → user id
           - expired → TokenExpiredError (401)
           - malformed or missing the user claim → InvalidTokenError (401)

        Args:
            authorization: Raw header value, None when absent

        Returns:
            Identifier of the authenticated user
        """
        if not authorization:
            raise MissingTokenError()

        match = BEARER_PATTERN.match(authorization)
        if match is None:
            raise InvalidAuthorizationHeaderError()

        verification = self._token_service.verify(match.group(1).strip())

        if verification.is_valid:
            assert verification.user_id is not None
            return verification.user_id

        if verification.status is TokenStatus.EXPIRED:
            raise TokenExpiredError()

        logger.warning(
            f"Rejected token ({verification.status.value}): {verification.detail}"
        )
        raise InvalidTokenError()
