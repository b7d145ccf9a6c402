"""Blog domain entity - posts, likes and comments."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional

from blogapi.domain.entities.preference import Preference
from blogapi.domain.exceptions import InvalidEntityStateException, BusinessRuleViolationException


@dataclass
class Likes:
    """
    Set of users who liked a blog.

    The count is derived from the set so the two can never drift apart.
    """

    users: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.users)

    def toggle(self, user_id: str) -> bool:
        """
        Add the user if absent, remove them if present.

        Returns:
            True if the blog is now liked by the user, False otherwise
        """
        if user_id in self.users:
            self.users.remove(user_id)
            return False
        self.users.append(user_id)
        return True


@dataclass
class Comment:
    """A single comment left on a blog."""

    user: str
    message: str
    id: Optional[str] = None


@dataclass
class Blog:
    """
    Blog domain entity.

    The author is fixed at creation. Likes and comments only change through
    toggle_like/add_comment, never through a plain update.
    """

    author: str
    title: str
    body: str
    tags: list[Preference] = field(default_factory=list)
    likes: Likes = field(default_factory=Likes)
    comments: list[Comment] = field(default_factory=list)
    authored_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    id: Optional[str] = None

    def __post_init__(self):
        if not self.author:
            raise InvalidEntityStateException("Blog must have an author.")

        if not self.title or len(self.title.strip()) == 0:
            raise InvalidEntityStateException("Blog must have a title.")

        if not self.body or len(self.body.strip()) == 0:
            raise InvalidEntityStateException("Blog must have a body.")

        self.tags = [Preference(t) for t in self.tags]

    def change_title(self, new_title: str) -> None:
        if not new_title or len(new_title.strip()) == 0:
            raise BusinessRuleViolationException("Cannot change blog title to empty value.")
        self.title = new_title

    def change_body(self, new_body: str) -> None:
        if not new_body or len(new_body.strip()) == 0:
            raise BusinessRuleViolationException("Cannot change blog body to empty value.")
        self.body = new_body

    def change_tags(self, tags: list[Preference]) -> None:
        self.tags = [Preference(t) for t in tags]

    def toggle_like(self, user_id: str) -> bool:
        """Toggle the user's like. Returns True when the blog ends up liked."""
        return self.likes.toggle(user_id)

    def add_comment(self, comment: Comment) -> None:
        """Append a comment; existing comments are never touched."""
        if not comment.message or len(comment.message.strip()) == 0:
            raise BusinessRuleViolationException("Comment cannot be empty.")
        self.comments.append(comment)

    def matches_preferences(self, preferences: list[Preference]) -> bool:
        """True if at least one tag is in the given preference set."""
        wanted = set(preferences)
        return any(tag in wanted for tag in self.tags)
