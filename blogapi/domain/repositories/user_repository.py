"""User repository interface."""

from abc import abstractmethod

from blogapi.domain.entities.user import User
from blogapi.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    User-specific repository interface.

    Extends base repository with user-specific query methods.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Find a user by their email address.

        Args:
            email: The user's email

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """
        Find a user by their username.

        Args:
            username: The normalized (lower-cased) username

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username_or_email(self, username: str, email: str) -> User | None:
        """
        Find any user holding the given username or the given email.

        Used by signup to report which of the two fields collided.
        """
        pass

    @abstractmethod
    async def search(self, filter_text: str) -> list[User]:
        """
        Case-insensitive substring search over username, first and last name.

        An empty filter matches every user.
        """
        pass
