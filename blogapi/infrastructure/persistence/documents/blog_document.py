"""Blog document mapping - infrastructure layer MongoDB representation."""

from typing import Any

from bson import ObjectId

from blogapi.domain.entities.blog import Blog, Comment, Likes


class BlogDocument:
    """
    Maps Blog entities to documents in the ``blogs`` collection.

    Document shape:
        {_id, author, title, body, likes: {count, users}, comments: [{_id, user, message}],
         authoredDate, tags}

    author, likes.users and comments.user are ObjectIds referencing users.
    likes.count is stored for queries but always rewritten from the set size.
    """

    COLLECTION = "blogs"

    @staticmethod
    def to_entity(document: dict[str, Any]) -> Blog:
        likes = document.get("likes") or {}
        return Blog(
            id=str(document["_id"]),
            author=str(document["author"]),
            title=document["title"],
            body=document["body"],
            tags=document.get("tags", []),
            likes=Likes(users=[str(u) for u in likes.get("users", [])]),
            comments=[
                Comment(
                    id=str(c["_id"]) if "_id" in c else None,
                    user=str(c["user"]),
                    message=c["message"],
                )
                for c in document.get("comments", [])
            ],
            authored_date=document["authoredDate"],
        )

    @staticmethod
    def from_entity(blog: Blog) -> dict[str, Any]:
        document: dict[str, Any] = {
            "author": ObjectId(blog.author),
            "title": blog.title,
            "body": blog.body,
            "likes": {
                "count": blog.likes.count,
                "users": [ObjectId(u) for u in blog.likes.users],
            },
            "comments": [BlogDocument.comment_to_document(c) for c in blog.comments],
            "authoredDate": blog.authored_date,
            "tags": [str(t) for t in blog.tags],
        }
        if blog.id is not None:
            document["_id"] = ObjectId(blog.id)
        return document

    @staticmethod
    def comment_to_document(comment: Comment) -> dict[str, Any]:
        return {
            "_id": ObjectId(comment.id) if comment.id else ObjectId(),
            "user": ObjectId(comment.user),
            "message": comment.message,
        }
