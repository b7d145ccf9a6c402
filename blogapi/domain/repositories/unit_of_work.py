"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blogapi.domain.repositories.blog_repository import IBlogRepository
    from blogapi.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface grouping the repositories used by one request.

    The document store applies every write to a single document, so the
    UoW does not open a multi-document transaction. It scopes repository
    access to an ``async with`` block and releases resources on exit.
    """

    users: "IUserRepository"
    blogs: "IBlogRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Enter async context manager and bind repositories."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        pass
