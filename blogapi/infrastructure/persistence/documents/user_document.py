"""User document mapping - infrastructure layer MongoDB representation."""

from typing import Any

from bson import ObjectId

from blogapi.domain.entities.user import PersonName, User


class UserDocument:
    """
    Maps User entities to documents in the ``users`` collection.

    Document shape:
        {_id, username, name: {first, last}, email, password, preferences}

    The domain layer never imports this class.
    """

    COLLECTION = "users"

    # Fields safe to return from search queries
    PUBLIC_PROJECTION = {"username": 1, "name": 1, "email": 1, "preferences": 1}

    @staticmethod
    def to_entity(document: dict[str, Any]) -> User:
        """
        Convert a stored document to a domain entity.

        Documents read with PUBLIC_PROJECTION carry no password; the entity
        gets a placeholder digest that can never verify.
        """
        name = document.get("name") or {}
        return User(
            id=str(document["_id"]),
            username=document["username"],
            name=PersonName(first=name.get("first", ""), last=name.get("last", "")),
            email=document["email"],
            password_hash=document.get("password") or "!",
            preferences=document.get("preferences", []),
        )

    @staticmethod
    def from_entity(user: User) -> dict[str, Any]:
        """
        Create a document from a domain entity.

        The ``_id`` key is only present for persisted entities.
        """
        document: dict[str, Any] = {
            "username": user.username,
            "name": {"first": user.name.first, "last": user.name.last},
            "email": user.email,
            "password": user.password_hash,
            "preferences": [str(p) for p in user.preferences],
        }
        if user.id is not None:
            document["_id"] = ObjectId(user.id)
        return document
