# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from .validation import require_state, require_text


class ListDevicesUseCase:
    """Use case for listing devices, optionally filtered by brand or state"""
    
    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository
    
    async def execute(self) -> List[Device]:
        """List all devices. No ordering is guaranteed."""
        return await self.device_repository.find_all()
    
    async def by_brand(self, brand: Optional[str]) -> List[Device]:
        """
        List devices of a brand (exact, case-sensitive match)
        
        Raises:
            InvalidDeviceInputError: If brand is None or blank
        """
        require_text(brand, "brand", "Brand")
        return await self.device_repository.find_by_brand(brand)
    
    async def by_state(self, state: Optional[DeviceState]) -> List[Device]:
        """
        List devices in a state
        
        Raises:
            InvalidDeviceInputError: If state is None
        """
        require_state(state, "State")
        return await self.device_repository.find_by_state(state)
