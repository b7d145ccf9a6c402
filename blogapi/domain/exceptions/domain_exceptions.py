"""Domain layer exceptions for broken entity invariants."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Raised by entities when a construction or mutation would leave them in
    a state the platform does not allow, for example:
        - A user without a password hash
        - A blog with an empty title
        - An empty comment

    Request validation normally rejects such input first, so reaching one
    of these means a caller bypassed the DTOs.
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class InvalidEntityStateException(DomainException):
    """An entity cannot be constructed from the given values."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class BusinessRuleViolationException(DomainException):
    """A mutation of an existing entity breaks one of its rules."""

    def __init__(self, message: str):
        super().__init__(message, error_code="BUSINESS_RULE_VIOLATION")
