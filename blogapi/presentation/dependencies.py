"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use Argon2PasswordHasher (not bcrypt or scrypt)
- Use UnitOfWork over motor/MongoDB
- Use JWTTokenService signed with the secret from Settings

The application layer never imports from here; it only knows interfaces.
In tests, override get_uow_factory / get_password_hasher through
app.dependency_overrides.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Header
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from blogapi.application.services.auth_service import AuthService
from blogapi.application.services.blog_service import BlogService
from blogapi.application.services.user_service import UserService
from blogapi.domain.repositories.unit_of_work import IUnitOfWork
from blogapi.domain.services.password_hasher import IPasswordHasher
from blogapi.domain.services.token_service import ITokenService
from blogapi.infrastructure.config.settings import Settings, get_settings
from blogapi.infrastructure.persistence.database import create_mongo_client, get_database
from blogapi.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from blogapi.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from blogapi.infrastructure.security.jwt_token_service import JWTTokenService


# Module-level singletons (created once, reused throughout app lifecycle)
_mongo_client: AsyncIOMotorClient | None = None
_password_hasher: IPasswordHasher | None = None


def get_mongo_client(settings: Settings = Depends(get_settings)) -> AsyncIOMotorClient:
    """Get or create the motor client singleton.

    Args:
        settings: Application settings (injected)

    Returns:
        AsyncIOMotorClient instance
    """
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client(settings)
    return _mongo_client


def close_mongo_client() -> None:
    """Close the client on shutdown; a later request would create a new one."""
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


def get_mongo_database(
    client: AsyncIOMotorClient = Depends(get_mongo_client),
    settings: Settings = Depends(get_settings),
) -> AsyncIOMotorDatabase:
    """Select the application database."""
    return get_database(client, settings)


def get_uow_factory(
    database: AsyncIOMotorDatabase = Depends(get_mongo_database),
) -> Callable[[], IUnitOfWork]:
    """
    Dependency that provides a Unit of Work factory.

    Dependency chain:
        get_settings() → get_mongo_client() → get_mongo_database() → get_uow_factory()

    Services call the factory once per use case:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(database)

    return uow_factory


def get_password_hasher() -> IPasswordHasher:
    """
    Dependency that provides password hasher.

    This is a SINGLETON - hashers are stateless and thread-safe.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher()
    return _password_hasher


def get_token_service(settings: Settings = Depends(get_settings)) -> ITokenService:
    """
    Dependency that provides token service.

    Returns a JWTTokenService configured with the signing secret from the
    environment.
    """
    return JWTTokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


def get_auth_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
    token_service: ITokenService = Depends(get_token_service),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    """Dependency that provides AuthService."""
    return AuthService(
        uow_factory=uow_factory,
        token_service=token_service,
        password_hasher=password_hasher,
    )


def get_user_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> UserService:
    """Dependency that provides UserService."""
    return UserService(uow_factory=uow_factory)


def get_blog_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> BlogService:
    """Dependency that provides BlogService."""
    return BlogService(uow_factory=uow_factory)


def get_current_user_id(
    authorization: Annotated[str | None, Header()] = None,
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """
    Authentication gate for protected routes.

    Reads the raw Authorization header instead of using HTTPBearer, because
    a missing header (401) and a header of the wrong shape (400) must be
    told apart.

    Usage in endpoints:
        @router.get("/details")
        async def details(user_id: str = Depends(get_current_user_id)):
            ...

    Raises:
        MissingTokenError, InvalidAuthorizationHeaderError,
        InvalidTokenError, TokenExpiredError (converted by exception handlers)
    """
    return auth_service.authenticate(authorization)
