# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceInUseError, DeviceNotFoundError
from ....domain.repositories.device_repository import DeviceRepository

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for permanently deleting a device that is not in use"""
    
    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str) -> None:
        """
        Delete a device by ID
        
        Raises:
            DeviceNotFoundError: If no device has this ID
            DeviceInUseError: If the device is IN_USE
        """
        device = await self.device_repository.find_by_id(device_id)
        if not device:
            raise DeviceNotFoundError(device_id)
        
        if not device.can_delete():
            logger.warning(f"Rejected delete of in-use device {device_id}")
            raise DeviceInUseError(device_id)
        
        await self.device_repository.delete_by_id(device_id)
        logger.info(f"Deleted device {device_id}")
