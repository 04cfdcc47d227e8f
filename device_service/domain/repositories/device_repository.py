from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.device import Device
from ..models.device_state import DeviceState


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""
    
    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (create or update) and return the stored copy"""
        pass
    
    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Device]:
        """Find all devices"""
        pass
    
    @abstractmethod
    async def find_by_brand(self, brand: str) -> List[Device]:
        """Find devices whose brand matches exactly (case-sensitive)"""
        pass
    
    @abstractmethod
    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find devices in the given state"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, device_id: str) -> None:
        """Permanently delete device by ID"""
        pass
    
    @abstractmethod
    async def exists_by_id(self, device_id: str) -> bool:
        """Check whether a device with this ID exists"""
        pass
