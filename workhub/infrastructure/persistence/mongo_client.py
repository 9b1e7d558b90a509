"""
Async MongoDB Client Factory.

Creates the motor client for the DI container. The client keeps its own
connection pool; one instance is shared for the whole application.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from workhub.config.settings import Config

logger = logging.getLogger(__name__)


def create_mongo_client(uri: str | None = None) -> AsyncIOMotorClient:
    """
    Create async MongoDB client.

    Note:
        - tz_aware=True so datetimes come back as UTC-aware values
        - No I/O happens here; the driver connects lazily on first command
    """
    client = AsyncIOMotorClient(
        uri or Config.MONGODB_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=Config.MONGODB_TIMEOUT_MS,
    )
    logger.info("[Mongo] Client created for database %s", Config.MONGODB_DATABASE)
    return client


def get_database(client: AsyncIOMotorClient, name: str | None = None) -> AsyncIOMotorDatabase:
    return client[name or Config.MONGODB_DATABASE]


def close_mongo_client(client: AsyncIOMotorClient) -> None:
    """Close MongoDB client. Should be called on application shutdown."""
    if client:
        client.close()
        logger.info("[Mongo] Connection closed")
