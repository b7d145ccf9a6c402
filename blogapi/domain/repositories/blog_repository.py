"""Blog repository interface."""

from abc import abstractmethod

from blogapi.domain.entities.blog import Blog, Comment
from blogapi.domain.entities.preference import Preference
from blogapi.domain.repositories.base import IRepository


class IBlogRepository(IRepository[Blog]):
    """
    Blog-specific repository interface.

    toggle_like and add_comment must be implemented as single atomic
    mutations of one document. Implementations may not read the blog,
    change it in memory and write it back.
    """

    @abstractmethod
    async def title_exists(self, title: str, exclude_id: str | None = None) -> bool:
        """
        Check whether a blog with exactly this title exists.

        Args:
            title: Title to look for
            exclude_id: Blog to ignore (the one being renamed)
        """
        pass

    @abstractmethod
    async def search(self, filter_text: str, author_id: str | None = None) -> list[Blog]:
        """
        Case-insensitive substring match on title OR any tag.

        Args:
            filter_text: Substring to look for; empty matches everything
            author_id: Restrict to blogs written by this user
        """
        pass

    @abstractmethod
    async def find_by_tags(self, tags: list[Preference]) -> list[Blog]:
        """Blogs carrying at least one of the given tags."""
        pass

    @abstractmethod
    async def toggle_like(self, blog_id: str, user_id: str) -> bool | None:
        """
        Atomically add or remove user_id from the blog's likes.

        Returns:
            True if the blog is now liked by the user, False if the like was
            removed, None if the blog does not exist
        """
        pass

    @abstractmethod
    async def add_comment(self, blog_id: str, comment: Comment) -> bool:
        """
        Atomically append a comment.

        Returns:
            True if appended, False if the blog does not exist
        """
        pass
