"""Application layer exceptions."""

from blogapi.application.exceptions.exceptions import (
    ApplicationError,
    BlogAlreadyExistsError,
    BlogNotFoundError,
    InvalidAuthorizationHeaderError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "BlogNotFoundError",
    "BlogAlreadyExistsError",
    "MissingTokenError",
    "InvalidAuthorizationHeaderError",
    "TokenExpiredError",
    "InvalidTokenError",
]
