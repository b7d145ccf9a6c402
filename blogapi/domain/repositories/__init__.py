"""Repository interfaces - define contracts for data access."""

from blogapi.domain.repositories.base import IRepository
from blogapi.domain.repositories.blog_repository import IBlogRepository
from blogapi.domain.repositories.unit_of_work import IUnitOfWork
from blogapi.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository", "IBlogRepository", "IUnitOfWork"]
