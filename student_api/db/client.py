"""
MongoDB client factory.

One MongoClient is shared by every request. pymongo manages its own
connection pool and is safe to use from the request thread pool.
"""

import logging
from functools import lru_cache

from pymongo import MongoClient
from pymongo.collection import Collection

from student_api.config import settings
from student_api.utils.constants import STUDENT_COLLECTION

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_mongo_client() -> MongoClient:
    """
    Create (once) the MongoDB client for the configured MONGO_URL.

    The client connects lazily: no network traffic happens until the first
    operation, so building it at startup cannot fail on an unreachable server.

    Returns:
        The process-wide MongoClient.
    """
    client: MongoClient = MongoClient(
        settings.MONGO_URL,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    )

    logger.info(f"Created MongoDB client for database '{settings.MONGO_DB_NAME}'")

    return client


def get_student_collection() -> Collection:
    """Return the `student` collection of the configured database."""
    return get_mongo_client()[settings.MONGO_DB_NAME][STUDENT_COLLECTION]


def close_mongo_client() -> None:
    """Close the shared client if one was created."""
    if get_mongo_client.cache_info().currsize == 0:
        return

    get_mongo_client().close()
    get_mongo_client.cache_clear()
    logger.info("MongoDB client closed")
