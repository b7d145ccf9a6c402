"""Blog repository implementation using motor."""

import re
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from blogapi.domain.entities.blog import Blog, Comment
from blogapi.domain.entities.preference import Preference
from blogapi.domain.repositories.blog_repository import IBlogRepository
from blogapi.infrastructure.persistence.documents.blog_document import BlogDocument
from blogapi.infrastructure.repositories.object_ids import parse_object_id


def _toggle_like_pipeline(user_id: Any) -> list[dict[str, Any]]:
    """
    Update pipeline that toggles one user in likes.users.

    Both stages run inside a single findOneAndUpdate, so the membership flip
    and the count recomputation are atomic for the document. The second stage
    sees the set written by the first.
    """
    users = {"$ifNull": ["$likes.users", []]}
    return [
        {
            "$set": {
                "likes.users": {
                    "$cond": [
                        {"$in": [user_id, users]},
                        {"$setDifference": [users, [user_id]]},
                        {"$concatArrays": [users, [user_id]]},
                    ]
                }
            }
        },
        {"$set": {"likes.count": {"$size": "$likes.users"}}},
    ]


class BlogRepository(IBlogRepository):
    """
    MongoDB implementation of IBlogRepository.

    Like and comment changes are pushed down to single-document update
    operators; nothing is read, changed in Python and written back.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with the blogs collection.

        Args:
            collection: motor collection holding blog documents
        """
        self._collection = collection

    async def get_by_id(self, id: str) -> Blog | None:
        object_id = parse_object_id(id)
        if object_id is None:
            return None

        document = await self._collection.find_one({"_id": object_id})
        return BlogDocument.to_entity(document) if document else None

    async def add(self, entity: Blog) -> Blog:
        document = BlogDocument.from_entity(entity)
        result = await self._collection.insert_one(document)
        entity.id = str(result.inserted_id)
        return entity

    async def update(self, entity: Blog) -> Blog:
        """Persist title, body and tags. Author, likes and comments are not written."""
        object_id = parse_object_id(entity.id)
        if object_id is None:
            raise ValueError(f"Blog with ID {entity.id} not found")

        result = await self._collection.update_one(
            {"_id": object_id},
            {
                "$set": {
                    "title": entity.title,
                    "body": entity.body,
                    "tags": [str(t) for t in entity.tags],
                }
            },
        )
        if result.matched_count == 0:
            raise ValueError(f"Blog with ID {entity.id} not found")

        return entity

    async def delete(self, id: str) -> bool:
        object_id = parse_object_id(id)
        if object_id is None:
            return False

        result = await self._collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def exists(self, id: str) -> bool:
        object_id = parse_object_id(id)
        if object_id is None:
            return False
        return await self._collection.count_documents({"_id": object_id}, limit=1) > 0

    async def title_exists(self, title: str, exclude_id: str | None = None) -> bool:
        query: dict[str, Any] = {"title": title}
        excluded = parse_object_id(exclude_id)
        if excluded is not None:
            query["_id"] = {"$ne": excluded}
        return await self._collection.count_documents(query, limit=1) > 0

    async def search(self, filter_text: str, author_id: str | None = None) -> list[Blog]:
        pattern = {"$regex": re.escape(filter_text), "$options": "i"}
        query: dict[str, Any] = {
            "$or": [
                {"title": pattern},
                {"tags": {"$elemMatch": pattern}},
            ]
        }
        if author_id is not None:
            author = parse_object_id(author_id)
            if author is None:
                return []
            query["author"] = author

        cursor = self._collection.find(query)
        return [BlogDocument.to_entity(document) async for document in cursor]

    async def find_by_tags(self, tags: list[Preference]) -> list[Blog]:
        if not tags:
            return []
        cursor = self._collection.find({"tags": {"$in": [str(t) for t in tags]}})
        return [BlogDocument.to_entity(document) async for document in cursor]

    async def toggle_like(self, blog_id: str, user_id: str) -> bool | None:
        object_id = parse_object_id(blog_id)
        user = parse_object_id(user_id)
        if object_id is None or user is None:
            return None

        document = await self._collection.find_one_and_update(
            {"_id": object_id},
            _toggle_like_pipeline(user),
            projection={"likes": 1},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None

        return user in document["likes"]["users"]

    async def add_comment(self, blog_id: str, comment: Comment) -> bool:
        object_id = parse_object_id(blog_id)
        if object_id is None:
            return False

        result = await self._collection.update_one(
            {"_id": object_id},
            {"$push": {"comments": BlogDocument.comment_to_document(comment)}},
        )
        return result.matched_count > 0
