"""Fake blog repository for testing without a database."""

import copy

from bson import ObjectId

from blogapi.domain.entities.blog import Blog, Comment
from blogapi.domain.entities.preference import Preference
from blogapi.domain.repositories.blog_repository import IBlogRepository


class FakeBlogRepository(IBlogRepository):
    """
    In-memory fake implementation of IBlogRepository.

    Likes and comments are applied directly to the stored entity, which is
    the in-memory equivalent of the single-document update the MongoDB
    repository issues.
    """

    def __init__(self, initial_data: list[Blog] | None = None):
        self._blogs: dict[str, Blog] = {}

        for blog in initial_data or []:
            stored = copy.deepcopy(blog)
            if stored.id is None:
                stored.id = str(ObjectId())
            self._blogs[stored.id] = stored

    async def get_by_id(self, id: str) -> Blog | None:
        blog = self._blogs.get(id)
        return copy.deepcopy(blog) if blog else None

    async def add(self, entity: Blog) -> Blog:
        stored = copy.deepcopy(entity)
        stored.id = str(ObjectId())
        self._blogs[stored.id] = stored
        return copy.deepcopy(stored)

    async def update(self, entity: Blog) -> Blog:
        """Replace title, body and tags; likes and comments stay as stored."""
        if entity.id is None or entity.id not in self._blogs:
            raise ValueError(f"Blog with ID {entity.id} not found")

        stored = self._blogs[entity.id]
        stored.title = entity.title
        stored.body = entity.body
        stored.tags = list(entity.tags)
        return copy.deepcopy(stored)

    async def delete(self, id: str) -> bool:
        return self._blogs.pop(id, None) is not None

    async def exists(self, id: str) -> bool:
        return id in self._blogs

    async def title_exists(self, title: str, exclude_id: str | None = None) -> bool:
        return any(
            blog.title == title and blog.id != exclude_id
            for blog in self._blogs.values()
        )

    async def search(self, filter_text: str, author_id: str | None = None) -> list[Blog]:
        """Case-insensitive substring match on title or any tag."""
        needle = filter_text.lower()
        return [
            copy.deepcopy(blog)
            for blog in self._blogs.values()
            if (author_id is None or blog.author == author_id)
            and (
                needle in blog.title.lower()
                or any(needle in tag.value for tag in blog.tags)
            )
        ]

    async def find_by_tags(self, tags: list[Preference]) -> list[Blog]:
        return [
            copy.deepcopy(blog)
            for blog in self._blogs.values()
            if blog.matches_preferences(tags)
        ]

    async def toggle_like(self, blog_id: str, user_id: str) -> bool | None:
        blog = self._blogs.get(blog_id)
        if blog is None:
            return None
        return blog.toggle_like(user_id)

    async def add_comment(self, blog_id: str, comment: Comment) -> bool:
        blog = self._blogs.get(blog_id)
        if blog is None:
            return False
        stored = copy.deepcopy(comment)
        stored.id = str(ObjectId())
        blog.add_comment(stored)
        return True

    # Helper methods for testing

    def clear(self) -> None:
        self._blogs.clear()

    def count(self) -> int:
        return len(self._blogs)

    def get_sync(self, blog_id: str) -> Blog | None:
        """Read the stored blog without copying (useful for assertions)."""
        return self._blogs.get(blog_id)
