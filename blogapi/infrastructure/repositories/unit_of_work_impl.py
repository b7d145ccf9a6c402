"""Unit of Work implementation over a motor database."""

from motor.motor_asyncio import AsyncIOMotorDatabase

from blogapi.domain.repositories.unit_of_work import IUnitOfWork
from blogapi.infrastructure.persistence.documents.blog_document import BlogDocument
from blogapi.infrastructure.persistence.documents.user_document import UserDocument
from blogapi.infrastructure.repositories.blog_repository_impl import BlogRepository
from blogapi.infrastructure.repositories.user_repository_impl import UserRepository


class UnitOfWork(IUnitOfWork):
    """
    MongoDB implementation of Unit of Work.

    Binds the user and blog repositories to one database handle for the
    duration of an ``async with`` block. Every write the services issue
    touches a single document, which MongoDB applies atomically, so no
    session or transaction is opened.

    Usage:
        async with UnitOfWork(database) as uow:
            user = await uow.users.get_by_id(user_id)
            await uow.blogs.add(blog)
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        """
        Initialize UoW with a database handle.

        Args:
            database: motor database shared across the application
        """
        self._database = database

    async def __aenter__(self) -> "UnitOfWork":
        """Bind repositories to their collections."""
        self.users = UserRepository(self._database[UserDocument.COLLECTION])
        self.blogs = BlogRepository(self._database[BlogDocument.COLLECTION])
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Nothing to release; the client is shared and closed at shutdown."""
        pass
