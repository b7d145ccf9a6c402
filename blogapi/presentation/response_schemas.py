"""Success envelopes returned by the API.

Every body carries ``success`` and ``message``; the payload key depends on
the endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field

from blogapi.application.dtos.blog_dto import BlogDTO
from blogapi.application.dtos.user_dto import UserDetailsDTO, UserSummaryDTO


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class TokenResponse(MessageResponse):
    token: str


class UserListResponse(MessageResponse):
    users: list[UserSummaryDTO]


class UserDetailsResponse(MessageResponse):
    user: UserDetailsDTO


class BlogCreatedResponse(MessageResponse):
    blog_id: str = Field(alias="blogId")

    model_config = ConfigDict(populate_by_name=True)


class BlogListResponse(MessageResponse):
    blogs: list[BlogDTO]


class LikeResponse(MessageResponse):
    liked: bool
