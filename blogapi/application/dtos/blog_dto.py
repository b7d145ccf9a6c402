"""Blog DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from blogapi.application.dtos.fields import BlogBody, BlogTitle, CommentText, FilterText, Tags
from blogapi.domain.entities.blog import Blog
from blogapi.domain.entities.preference import Preference


class CreateBlogDTO(BaseModel):
    """
    DTO for creating a blog. The caller becomes the author.

    Validation:
    - title / body: trimmed, non-empty
    - tags: vocabulary values (may be empty)
    """

    title: BlogTitle
    body: BlogBody
    tags: Tags

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Analytical engines",
                "body": "Notes on the machine.",
                "tags": ["tech", "science"],
            }
        }
    )


class UpdateBlogDTO(BaseModel):
    """
    DTO for updating a blog.

    Only title, body and tags can change; author, likes and comments are
    not part of this DTO so they cannot be set through an update.
    """

    title: Optional[BlogTitle] = None
    body: Optional[BlogBody] = None
    tags: Optional[Tags] = None


class CommentDTO(BaseModel):
    """DTO for appending a comment."""

    comment: CommentText


class SearchFilterDTO(BaseModel):
    """Query parameters shared by blog and user searches."""

    filter: FilterText = ""


class LikesDTO(BaseModel):
    count: int
    users: list[str]


class CommentViewDTO(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    user: str
    message: str

    model_config = ConfigDict(populate_by_name=True)


class BlogDTO(BaseModel):
    """DTO for returning blog data to presentation layer."""

    id: str = Field(alias="_id")
    author: str
    title: str
    body: str
    likes: LikesDTO
    comments: list[CommentViewDTO]
    authored_date: datetime = Field(alias="authoredDate")
    tags: list[Preference]

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, blog: Blog) -> "BlogDTO":
        """
        Convert a PERSISTED blog entity to DTO.

        Raises:
            ValueError: If the entity has no id yet
        """
        if blog.id is None:
            raise ValueError(
                "Cannot create BlogDTO from non-persisted entity: missing id. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls(
            id=blog.id,
            author=blog.author,
            title=blog.title,
            body=blog.body,
            likes=LikesDTO(count=blog.likes.count, users=list(blog.likes.users)),
            comments=[
                CommentViewDTO(id=c.id, user=c.user, message=c.message)
                for c in blog.comments
            ],
            authored_date=blog.authored_date,
            tags=list(blog.tags),
        )
