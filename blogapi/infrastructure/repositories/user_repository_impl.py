"""User repository implementation using motor."""

import re

from motor.motor_asyncio import AsyncIOMotorCollection

from blogapi.domain.entities.user import User
from blogapi.domain.repositories.user_repository import IUserRepository
from blogapi.infrastructure.persistence.documents.user_document import UserDocument
from blogapi.infrastructure.repositories.object_ids import parse_object_id


class UserRepository(IUserRepository):
    """
    MongoDB implementation of IUserRepository.

    This class:
    1. Implements the domain interface
    2. Uses motor for database operations
    3. Converts between documents and domain entities
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with the users collection.

        Args:
            collection: motor collection holding user documents
        """
        self._collection = collection

    async def get_by_id(self, id: str) -> User | None:
        """Get user by ID."""
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        document = await self._collection.find_one({"_id": object_id})
        return UserDocument.to_entity(document) if document else None

    async def add(self, entity: User) -> User:
        """Insert a new user and return it with its generated ID."""
        document = UserDocument.from_entity(entity)
        result = await self._collection.insert_one(document)
        entity.id = str(result.inserted_id)
        return entity

    async def update(self, entity: User) -> User:
        """
        Persist the mutable profile fields.

        Name parts are written with dotted keys so one part never replaces
        the whole sub-document.
        """
        object_id = parse_object_id(entity.id)
        if object_id is None:
            raise ValueError(f"User with ID {entity.id} not found")

        result = await self._collection.update_one(
            {"_id": object_id},
            {
                "$set": {
                    "username": entity.username,
                    "name.first": entity.name.first,
                    "name.last": entity.name.last,
                    "email": entity.email,
                    "preferences": [str(p) for p in entity.preferences],
                }
            },
        )
        if result.matched_count == 0:
            raise ValueError(f"User with ID {entity.id} not found")

        return entity

    async def delete(self, id: str) -> bool:
        """Delete user by ID."""
        object_id = parse_object_id(id)
        if object_id is None:
            return False

        result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def exists(self, id: str) -> bool:
        """Check if user exists."""
        object_id = parse_object_id(id)
        if object_id is None:
            return False
        return await self._collection.count_documents({"_id": object_id}, limit=1) > 0

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        document = await self._collection.find_one({"email": email})
        return UserDocument.to_entity(document) if document else None

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username."""
        document = await self._collection.find_one({"username": username})
        return UserDocument.to_entity(document) if document else None

    async def find_by_username_or_email(self, username: str, email: str) -> User | None:
        """Get any user holding the username or the email."""
        document = await self._collection.find_one(
            {"$or": [{"username": username}, {"email": email}]}
        )
        return UserDocument.to_entity(document) if document else None

    async def search(self, filter_text: str) -> list[User]:
        """Case-insensitive literal substring search on username and name parts."""
        pattern = {"$regex": re.escape(filter_text), "$options": "i"}
        cursor = self._collection.find(
            {
                "$or": [
                    {"username": pattern},
                    {"name.first": pattern},
                    {"name.last": pattern},
                ]
            },
            UserDocument.PUBLIC_PROJECTION,
        )
        return [UserDocument.to_entity(document) async for document in cursor]
