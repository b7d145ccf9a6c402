"""Blog service - application layer business logic."""

import logging
from collections.abc import Callable

from blogapi.application.dtos.blog_dto import BlogDTO, CommentDTO, CreateBlogDTO, UpdateBlogDTO
from blogapi.application.exceptions import (
    BlogAlreadyExistsError,
    BlogNotFoundError,
    UserNotFoundError,
)
from blogapi.domain.entities.blog import Blog, Comment
from blogapi.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class BlogService:
    """
    Blog service encapsulating post, like and comment use cases.

    Likes and comments are delegated to repository operations that mutate a
    single document atomically; this service never reads a blog, changes
    its likes in memory and writes it back.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
        """
        self._uow_factory = uow_factory

    async def create_blog(self, author_id: str, dto: CreateBlogDTO) -> BlogDTO:
        """
        Create a blog authored by the caller.

        Raises:
            BlogAlreadyExistsError: If any blog already has this exact title
        """
        async with self._uow_factory() as uow:
            if await uow.blogs.title_exists(dto.title):
                raise BlogAlreadyExistsError()

            blog = Blog(author=author_id, title=dto.title, body=dto.body, tags=dto.tags)
            created_blog = await uow.blogs.add(blog)

        logger.info(f"Blog {created_blog.id} created by user {author_id}")
        return BlogDTO.from_entity(created_blog)

    async def update_blog(self, blog_id: str, dto: UpdateBlogDTO) -> BlogDTO:
        """
        Update title, body and/or tags.

        Raises:
            BlogNotFoundError: If the blog does not exist
            BlogAlreadyExistsError: If the new title belongs to another blog
        """
        async with self._uow_factory() as uow:
            blog = await uow.blogs.get_by_id(blog_id)
            if blog is None:
                raise BlogNotFoundError(f"Blog with ID {blog_id} not found")

            if dto.title is not None and dto.title != blog.title:
                if await uow.blogs.title_exists(dto.title, exclude_id=blog_id):
                    raise BlogAlreadyExistsError()
                blog.change_title(dto.title)

            if dto.body is not None:
                blog.change_body(dto.body)

            if dto.tags is not None:
                blog.change_tags(dto.tags)

            updated_blog = await uow.blogs.update(blog)
            return BlogDTO.from_entity(updated_blog)

    async def delete_blog(self, blog_id: str) -> None:
        """
        Delete a blog.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        async with self._uow_factory() as uow:
            if not await uow.blogs.delete(blog_id):
                raise BlogNotFoundError(f"Blog with ID {blog_id} not found")

        logger.info(f"Blog {blog_id} deleted")

    async def list_user_blogs(self, user_id: str, filter_text: str = "") -> list[BlogDTO]:
        """Blogs written by user_id whose title or a tag contains filter_text."""
        async with self._uow_factory() as uow:
            blogs = await uow.blogs.search(filter_text, author_id=user_id)
            return [BlogDTO.from_entity(blog) for blog in blogs]

    async def list_all_blogs(self, filter_text: str = "") -> list[BlogDTO]:
        """All blogs whose title or a tag contains filter_text."""
        async with self._uow_factory() as uow:
            blogs = await uow.blogs.search(filter_text)
            return [BlogDTO.from_entity(blog) for blog in blogs]

    async def get_recommended_blogs(self, user_id: str) -> list[BlogDTO]:
        """
        Blogs sharing at least one tag with the caller's preferences.

        Raises:
            UserNotFoundError: If the caller no longer exists
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            blogs = await uow.blogs.find_by_tags(user.preferences)
            return [BlogDTO.from_entity(blog) for blog in blogs]

    async def toggle_like(self, blog_id: str, user_id: str) -> bool:
        """
        Like the blog if the caller has not liked it yet, otherwise unlike it.

        Returns:
            True if the blog is now liked by the caller

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        async with self._uow_factory() as uow:
            liked = await uow.blogs.toggle_like(blog_id, user_id)

        if liked is None:
            raise BlogNotFoundError(f"Blog with ID {blog_id} not found")
        return liked

    async def add_comment(self, blog_id: str, user_id: str, dto: CommentDTO) -> None:
        """
        Append the caller's comment to the blog.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        comment = Comment(user=user_id, message=dto.comment)
        async with self._uow_factory() as uow:
            appended = await uow.blogs.add_comment(blog_id, comment)

        if not appended:
            raise BlogNotFoundError(f"Blog with ID {blog_id} not found")
