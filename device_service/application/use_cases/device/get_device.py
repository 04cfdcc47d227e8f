# Local application imports
from ....domain.exceptions import DeviceNotFoundError
from ....domain.models.device import Device
from ....domain.repositories.device_repository import DeviceRepository


class GetDeviceUseCase:
    """Use case for getting a device by ID"""
    
    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository
    
    async def execute(self, device_id: str) -> Device:
        """
        Get a device by ID
        
        Raises:
            DeviceNotFoundError: If no device has this ID
        """
        device = await self.device_repository.find_by_id(device_id)
        
        if not device:
            raise DeviceNotFoundError(device_id)
        
        return device
