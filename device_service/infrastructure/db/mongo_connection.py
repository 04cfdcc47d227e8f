# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import DeviceFields

logger = logging.getLogger(__name__)

DEVICE_COLLECTION_NAME = "devices"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB
    
    Returns:
        MongoDB collection for devices
    """
    return get_database()[DEVICE_COLLECTION_NAME]


async def ensure_device_indexes(collection: Optional[AsyncIOMotorCollection] = None) -> None:
    """Create the brand and state indexes used by the query endpoints"""
    device_collection = collection if collection is not None else get_device_collection()
    await device_collection.create_index([(DeviceFields.BRAND, ASCENDING)], name="idx_devices_brand")
    await device_collection.create_index([(DeviceFields.STATE, ASCENDING)], name="idx_devices_state")
    logger.info("Device collection indexes ensured")


def close_mongo_connection() -> None:
    """Close the MongoDB client, if one was opened"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
