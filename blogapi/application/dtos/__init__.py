"""Data Transfer Objects for application layer."""

from blogapi.application.dtos.auth_dto import LoginDTO, TokenDTO
from blogapi.application.dtos.blog_dto import (
    BlogDTO,
    SearchFilterDTO,
    CommentDTO,
    CreateBlogDTO,
    UpdateBlogDTO,
)
from blogapi.application.dtos.user_dto import (
    CreateUserDTO,
    UpdateUserDTO,
    UserDetailsDTO,
    UserSummaryDTO,
)

__all__ = [
    "LoginDTO",
    "TokenDTO",
    "BlogDTO",
    "SearchFilterDTO",
    "CommentDTO",
    "CreateBlogDTO",
    "UpdateBlogDTO",
    "CreateUserDTO",
    "UpdateUserDTO",
    "UserDetailsDTO",
    "UserSummaryDTO",
]
