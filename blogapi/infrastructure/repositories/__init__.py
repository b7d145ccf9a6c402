"""Repository implementations using motor."""

from blogapi.infrastructure.repositories.blog_repository_impl import BlogRepository
from blogapi.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from blogapi.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository", "BlogRepository", "UnitOfWork"]
