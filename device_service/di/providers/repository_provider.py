import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the DeviceRepository implementation for the configured backend.
        
        Raises:
            ValueError: If DEVICE_STORAGE_BACKEND names an unknown backend
        """
        backend = get_settings().storage_backend
        
        if backend == "mongo":
            repository = MongoDeviceRepository(device_collection=container.get("device_collection"))
        elif backend == "memory":
            repository = InMemoryDeviceRepository()
        else:
            raise ValueError(f"Unknown device storage backend: {backend!r} (expected 'mongo' or 'memory')")
        
        logger.info(f"Using {backend} device repository")
        container.register_singleton(DeviceRepository, repository)
