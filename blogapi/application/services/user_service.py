"""User service - application layer business logic."""

import logging
from collections.abc import Callable

from blogapi.application.dtos.user_dto import UpdateUserDTO, UserDetailsDTO, UserSummaryDTO
from blogapi.application.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
)
from blogapi.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class UserService:
    """
    User service encapsulating profile and directory use cases.

    This service:
    1. Depends on IUnitOfWork abstraction (not concrete implementation)
    2. Uses domain entities internally
    3. Returns DTOs to the presentation layer

    Account creation and login live in AuthService because they issue tokens.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances

        Example:
            # Production
            service = UserService(uow_factory=lambda: UnitOfWork(database))

            # Testing
            service = UserService(uow_factory=lambda: FakeUnitOfWork())
        """
        self._uow_factory = uow_factory

    async def get_user_details(self, user_id: str) -> UserDetailsDTO:
        """
        Retrieve the caller's own profile.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)

            if user is None:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            return UserDetailsDTO.from_entity(user)

    async def search_users(self, filter_text: str) -> list[UserSummaryDTO]:
        """
        Find users whose username, first or last name contains filter_text.

        Matching is case-insensitive; an empty filter returns every user.
        """
        async with self._uow_factory() as uow:
            users = await uow.users.search(filter_text)
            return [UserSummaryDTO.from_entity(user) for user in users]

    async def update_user(self, user_id: str, dto: UpdateUserDTO) -> UserDetailsDTO:
        """
        Update the caller's profile.

        Only the fields present in the DTO change. A name update may carry
        just one part; the other part is kept.

        Raises:
            UserNotFoundError: If the user no longer exists
            UserAlreadyExistsError: If the new username or email is taken by another user
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            if dto.username and dto.username != user.username:
                other = await uow.users.get_by_username(dto.username)
                if other is not None and other.id != user.id:
                    raise UserAlreadyExistsError("username")
                user.change_username(dto.username)

            if dto.email and dto.email != user.email:
                existing = await uow.users.get_by_email(dto.email)
                if existing is not None and existing.id != user.id:
                    raise UserAlreadyExistsError("email")
                user.change_email(dto.email)

            if dto.name is not None:
                user.change_name(first=dto.name.first, last=dto.name.last)

            if dto.preferences is not None:
                user.change_preferences(dto.preferences)

            updated_user = await uow.users.update(user)

            logger.info(f"User {user_id} updated profile")
            return UserDetailsDTO.from_entity(updated_user)

    async def delete_user(self, user_id: str) -> None:
        """
        Delete the caller's account.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        async with self._uow_factory() as uow:
            deleted = await uow.users.delete(user_id)

            if not deleted:
                raise UserNotFoundError(f"User with ID {user_id} not found")

        logger.info(f"User {user_id} deleted")
