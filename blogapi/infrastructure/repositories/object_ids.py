"""ObjectId helpers shared by the MongoDB repositories."""

from bson import ObjectId
from bson.errors import InvalidId


def parse_object_id(value: str | None) -> ObjectId | None:
    """Convert a string id to ObjectId; malformed ids yield None."""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
