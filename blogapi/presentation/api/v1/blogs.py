"""Blog API endpoints.

Every route requires a bearer token; the router-level dependency rejects
the request before the body or query is validated.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from blogapi.application.dtos.blog_dto import (
    CommentDTO,
    CreateBlogDTO,
    SearchFilterDTO,
    UpdateBlogDTO,
)
from blogapi.application.services.blog_service import BlogService
from blogapi.presentation.dependencies import get_blog_service, get_current_user_id
from blogapi.presentation.response_schemas import (
    BlogCreatedResponse,
    BlogListResponse,
    LikeResponse,
    MessageResponse,
)

router = APIRouter(
    prefix="/blog",
    tags=["blogs"],
    dependencies=[Depends(get_current_user_id)],
)


@router.post(
    "/create",
    response_model=BlogCreatedResponse,
    summary="Create a blog",
    description="Create a blog authored by the caller. Titles are unique.",
)
async def create_blog(
    dto: CreateBlogDTO,
    user_id: str = Depends(get_current_user_id),
    service: BlogService = Depends(get_blog_service),
) -> BlogCreatedResponse:
    """
    Create a new blog.

    Raises:
        409 Conflict: If a blog with the same title exists
    """
    blog = await service.create_blog(user_id, dto)
    return BlogCreatedResponse(message="Blog created successfully", blog_id=blog.id)


@router.put(
    "/update/{blog_id}",
    response_model=MessageResponse,
    summary="Update a blog",
)
async def update_blog(
    blog_id: str,
    dto: UpdateBlogDTO,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    """Update title, body and/or tags."""
    await service.update_blog(blog_id, dto)
    return MessageResponse(message="Blog updated successfully")


@router.delete(
    "/delete/{blog_id}",
    response_model=MessageResponse,
    summary="Delete a blog",
)
async def delete_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.delete_blog(blog_id)
    return MessageResponse(message="Blog deleted successfully")


@router.get("", response_model=BlogListResponse, include_in_schema=False)
@router.get(
    "/",
    response_model=BlogListResponse,
    summary="List my blogs",
    description="Blogs written by the caller whose title or a tag contains the filter.",
)
async def list_my_blogs(
    query: Annotated[SearchFilterDTO, Query()],
    user_id: str = Depends(get_current_user_id),
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    blogs = await service.list_user_blogs(user_id, query.filter)
    return BlogListResponse(message="fetched all the users' blogs successfully", blogs=blogs)


@router.get(
    "/all",
    response_model=BlogListResponse,
    summary="List all blogs",
    description="All blogs whose title or a tag contains the filter.",
)
async def list_all_blogs(
    query: Annotated[SearchFilterDTO, Query()],
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    blogs = await service.list_all_blogs(query.filter)
    return BlogListResponse(message="fetched all the blogs successfully", blogs=blogs)


@router.get(
    "/recommended",
    response_model=BlogListResponse,
    summary="Recommended blogs",
    description="Blogs tagged with at least one of the caller's preferences.",
)
async def list_recommended_blogs(
    user_id: str = Depends(get_current_user_id),
    service: BlogService = Depends(get_blog_service),
) -> BlogListResponse:
    blogs = await service.get_recommended_blogs(user_id)
    return BlogListResponse(
        message="fetched all the recommended blogs successfully", blogs=blogs
    )


@router.put(
    "/like/{blog_id}",
    response_model=LikeResponse,
    summary="Toggle like",
    description="Like the blog, or remove the caller's like if already liked.",
)
async def toggle_like(
    blog_id: str,
    user_id: str = Depends(get_current_user_id),
    service: BlogService = Depends(get_blog_service),
) -> LikeResponse:
    """
    Toggle the caller's like.

    Returns:
        liked=True when the blog is now liked by the caller
    """
    liked = await service.toggle_like(blog_id, user_id)
    return LikeResponse(message="Like toggled successfully", liked=liked)


@router.put(
    "/comment/{blog_id}",
    response_model=MessageResponse,
    summary="Comment on a blog",
)
async def add_comment(
    blog_id: str,
    dto: CommentDTO,
    user_id: str = Depends(get_current_user_id),
    service: BlogService = Depends(get_blog_service),
) -> MessageResponse:
    await service.add_comment(blog_id, user_id, dto)
    return MessageResponse(message="Comment added successfully")
