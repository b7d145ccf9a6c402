"""User DTOs for application layer using Pydantic."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from blogapi.application.dtos.fields import (
    Email,
    FirstName,
    LastName,
    Password,
    Preferences,
    Username,
)
from blogapi.domain.entities.preference import Preference
from blogapi.domain.entities.user import User


class NameDTO(BaseModel):
    """First and last name, both required."""

    first: FirstName
    last: LastName


class CreateUserDTO(BaseModel):
    """
    DTO for signing up.

    Validation (first failing field wins):
    - username: trimmed, lower-cased, 1-30 characters
    - name.first / name.last: trimmed, 1-50 characters
    - password: trimmed, at least 6 characters
    - email: trimmed, lower-cased, valid address, 6-30 characters
    - preferences: vocabulary values, at least 3 distinct
    """

    username: Username
    name: NameDTO
    password: Password
    email: Email
    preferences: Preferences

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "ada",
                "name": {"first": "Ada", "last": "Lovelace"},
                "password": "secret1",
                "email": "ada@example.com",
                "preferences": ["tech", "music", "art"],
            }
        }
    )


class UpdateNameDTO(BaseModel):
    """Name parts for a partial update; either may be omitted."""

    first: Optional[FirstName] = None
    last: Optional[LastName] = None


class UpdateUserDTO(BaseModel):
    """
    DTO for updating the caller's profile.

    Every field is optional; omitted fields are left unchanged. When
    preferences are sent they must still contain at least 3 values.
    """

    username: Optional[Username] = None
    name: Optional[UpdateNameDTO] = None
    email: Optional[Email] = None
    preferences: Optional[Preferences] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": {"last": "King"},
                "preferences": ["tech", "science", "books"],
            }
        }
    )


class UserSummaryDTO(BaseModel):
    """Public projection returned by user search."""

    id: str = Field(alias="_id")
    username: str
    name: NameDTO
    email: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserSummaryDTO":
        """
        Convert a PERSISTED user to its public projection.

        Raises:
            ValueError: If the entity has no id yet
        """
        if user.id is None:
            raise ValueError(
                "Cannot create UserSummaryDTO from non-persisted entity: missing id."
            )
        return cls(
            id=user.id,
            username=user.username,
            name=NameDTO.model_construct(first=user.name.first, last=user.name.last),
            email=user.email,
        )


class UserDetailsDTO(BaseModel):
    """The caller's own profile. Never includes the password digest."""

    username: str
    name: NameDTO
    email: str
    preferences: list[Preference]

    @classmethod
    def from_entity(cls, user: User) -> "UserDetailsDTO":
        return cls(
            username=user.username,
            name=NameDTO.model_construct(first=user.name.first, last=user.name.last),
            email=user.email,
            preferences=list(user.preferences),
        )
