"""
MongoDB connection management.

One MongoClient per process. The driver owns the connection pool and
connects lazily, so building the client never blocks on the network.
"""

import logging
from functools import lru_cache

from pymongo import MongoClient
from pymongo.collection import Collection

from app.core.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_mongo_client() -> MongoClient:
    """Build (once) the process-wide MongoDB client from settings."""
    logger.info("Creating MongoDB client for database=%s", settings.mongo_db)
    return MongoClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        tz_aware=True,
    )


def get_users_collection() -> Collection:
    """Return the collection holding one document per user."""
    client = get_mongo_client()
    return client[settings.mongo_db][settings.mongo_collection]


def close_mongo_client() -> None:
    """Close the cached client, if one was created."""
    if get_mongo_client.cache_info().currsize:
        get_mongo_client().close()
        get_mongo_client.cache_clear()
        logger.info("MongoDB client closed")
