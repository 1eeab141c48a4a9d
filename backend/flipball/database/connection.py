"""
MongoDB connection and Beanie ODM initialization.

This module provides:
- MongoDB client connection via Motor (async driver)
- Beanie ODM initialization
- Health check utilities
"""

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from flipball.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB client instance
_client: Optional[AsyncIOMotorClient] = None


async def init_db() -> None:
    """
    Initialize MongoDB connection and Beanie ODM.
    Creates the unique email index on the users collection.
    """
    global _client

    settings = get_settings()
    _client = AsyncIOMotorClient(settings.mongo_uri)

    # Imported here to avoid a circular import with models -> database.base
    from flipball.models import get_document_models

    await init_beanie(
        database=_client[settings.database_name],
        document_models=get_document_models(),
    )


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client instance.
    """
    if _client is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database instance.
    """
    return get_client()[get_settings().database_name]


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    if _client is None:
        return False

    try:
        await _client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    settings = get_settings()
    sanitized_url = sanitize_mongodb_url(settings.mongo_uri)

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": sanitized_url,
        "database": settings.database_name,
        "environment": settings.environment,
    }


def sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url:
        return url

    try:
        # Handle mongodb+srv:// or mongodb://
        if "://" in url:
            protocol, rest = url.split("://", 1)
            if "@" in rest:
                credentials, host = rest.split("@", 1)
                if ":" in credentials:
                    username = credentials.split(":", 1)[0]
                    return f"{protocol}://{username}:***@{host}"
        return url
    except ValueError:
        return url
