from .mongo_connection import get_database, get_device_collection, ensure_device_indexes, close_mongo_connection
from .mongo_device_repository import MongoDeviceRepository
from .in_memory_device_repository import InMemoryDeviceRepository

__all__ = [
    "get_database",
    "get_device_collection",
    "ensure_device_indexes",
    "close_mongo_connection",
    "MongoDeviceRepository",
    "InMemoryDeviceRepository",
]
