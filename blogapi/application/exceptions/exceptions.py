"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UserNotFoundError(ApplicationError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")


class UserAlreadyExistsError(ApplicationError):
    """Raised when a username or email is already held by another user."""

    MESSAGES = {
        "username": "This username is already taken",
        "email": "This email address already exists",
    }

    def __init__(self, field: str):
        self.field = field
        super().__init__(self.MESSAGES[field], error_code="USER_ALREADY_EXISTS")


class InvalidCredentialsError(ApplicationError):
    """Raised when the password does not match the stored digest."""

    def __init__(self, message: str = "Incorrect password entered"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class BlogNotFoundError(ApplicationError):
    """Raised when a blog is not found."""

    def __init__(self, message: str = "Blog not found"):
        super().__init__(message, error_code="BLOG_NOT_FOUND")


class BlogAlreadyExistsError(ApplicationError):
    """Raised when another blog already uses the title."""

    def __init__(self, message: str = "Blog with same title exists"):
        super().__init__(message, error_code="BLOG_ALREADY_EXISTS")


class MissingTokenError(ApplicationError):
    """Raised when a protected route is called without an Authorization header."""

    def __init__(self, message: str = "Access Token is missing"):
        super().__init__(message, error_code="TOKEN_MISSING")


class InvalidAuthorizationHeaderError(ApplicationError):
    """Raised when the Authorization header is not of the form 'Bearer <token>'."""

    def __init__(self, message: str = "Invalid authorization key"):
        super().__init__(message, error_code="INVALID_AUTHORIZATION_HEADER")


class TokenExpiredError(ApplicationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Access token has expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class InvalidTokenError(ApplicationError):
    """Raised when a token is tampered, malformed or carries no user id."""

    def __init__(self, message: str = "Invalid Access token supplied"):
        super().__init__(message, error_code="INVALID_TOKEN")
