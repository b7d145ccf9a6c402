"""MongoDB client and database management."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, IndexModel

from blogapi.infrastructure.config.settings import Settings
from blogapi.infrastructure.persistence.documents.blog_document import BlogDocument
from blogapi.infrastructure.persistence.documents.user_document import UserDocument

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create motor client from settings.

    The client connects lazily, so building it never blocks.

    Args:
        settings: Application settings containing database configuration

    Returns:
        Configured AsyncIOMotorClient instance
    """
    return AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        tz_aware=True,
    )


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Select the application database on a client."""
    return client[settings.mongo_database_name]


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes that back username, email and title uniqueness.

    Service-level checks catch the common case; these indexes catch two
    concurrent inserts racing past the check.
    """
    await database[UserDocument.COLLECTION].create_indexes(
        [
            IndexModel([("username", ASCENDING)], unique=True),
            IndexModel([("email", ASCENDING)], unique=True),
        ]
    )
    await database[BlogDocument.COLLECTION].create_indexes(
        [
            IndexModel([("title", ASCENDING)], unique=True),
            IndexModel([("author", ASCENDING)]),
            IndexModel([("tags", ASCENDING)]),
        ]
    )
    logger.info("MongoDB indexes ensured")
