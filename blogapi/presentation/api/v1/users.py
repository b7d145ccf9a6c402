"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from blogapi.application.dtos.auth_dto import LoginDTO
from blogapi.application.dtos.blog_dto import SearchFilterDTO
from blogapi.application.dtos.user_dto import CreateUserDTO, UpdateUserDTO
from blogapi.application.services.auth_service import AuthService
from blogapi.application.services.user_service import UserService
from blogapi.presentation.dependencies import (
    get_auth_service,
    get_current_user_id,
    get_user_service,
)
from blogapi.presentation.response_schemas import (
    MessageResponse,
    TokenResponse,
    UserDetailsResponse,
    UserListResponse,
)

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign up",
    description="Create an account and receive an access token.",
)
async def signup(
    dto: CreateUserDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create a new user.

    Exception handling is done by global exception handlers.
    The service layer raises domain/application exceptions,
    which are automatically converted to appropriate HTTP responses.

    Raises:
        409 Conflict: If the username or email is already taken
    """
    token = await auth_service.signup(dto)
    return TokenResponse(message="User created successfully", token=token.token)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    description="Authenticate with email and password, returns an access token.",
)
async def login(
    dto: LoginDTO,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Authenticate user and receive a JWT.

    Use the token in the Authorization header for subsequent requests:
    Authorization: Bearer <token>

    Raises:
        404 Not Found: If no account has this email
        401 Unauthorized: If the password is incorrect
    """
    token = await auth_service.login(dto)
    return TokenResponse(message="User logged in successfully", token=token.token)


@router.put(
    "/update",
    response_model=MessageResponse,
    summary="Update profile",
    description="Update any of username, name, email and preferences of the caller.",
)
async def update_user(
    dto: UpdateUserDTO,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Update the authenticated user."""
    await service.update_user(user_id, dto)
    return MessageResponse(message="User-Info updated successfully")


@router.delete(
    "/delete",
    response_model=MessageResponse,
    summary="Delete account",
)
async def delete_user(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")


@router.get(
    "/bulk",
    response_model=UserListResponse,
    summary="Search users",
    description="Case-insensitive substring search over username, first and last name.",
)
async def search_users(
    query: Annotated[SearchFilterDTO, Query()],
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Search users; an empty filter lists everyone."""
    users = await service.search_users(query.filter)
    return UserListResponse(message="Users fetched successfully.", users=users)


@router.get(
    "/details",
    response_model=UserDetailsResponse,
    summary="Get current user",
)
async def get_details(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserDetailsResponse:
    """
    Get the authenticated user's profile.

    The password hash is never part of the response.
    """
    user = await service.get_user_details(user_id)
    return UserDetailsResponse(message="Users details fetched successfully", user=user)
