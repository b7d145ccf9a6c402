"""Domain exceptions - business rule violations."""

from blogapi.domain.exceptions.domain_exceptions import (
    BusinessRuleViolationException,
    DomainException,
    InvalidEntityStateException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "BusinessRuleViolationException",
]
