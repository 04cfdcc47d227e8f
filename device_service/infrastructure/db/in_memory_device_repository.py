"""Dictionary-backed DeviceRepository for local runs and tests."""

# Standard library imports
from dataclasses import replace
from typing import Dict, List, Optional

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.models.device_state import DeviceState


class InMemoryDeviceRepository(DeviceRepository):
    """Keeps devices in a dict keyed by ID. Stores and hands out copies."""
    
    def __init__(self) -> None:
        self._devices: Dict[str, Device] = {}
    
    async def save(self, device: Device) -> Device:
        if not device:
            raise ValueError("Device cannot be None")
        
        existing = self._devices.get(device.id)
        stored = replace(device)
        if existing is not None:
            # creation time is fixed by the first save
            stored.creation_time = existing.creation_time
        self._devices[device.id] = stored
        return replace(stored)
    
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        device = self._devices.get(device_id)
        return replace(device) if device is not None else None
    
    async def find_all(self) -> List[Device]:
        return [replace(device) for device in self._devices.values()]
    
    async def find_by_brand(self, brand: str) -> List[Device]:
        return [replace(device) for device in self._devices.values() if device.brand == brand]
    
    async def find_by_state(self, state: DeviceState) -> List[Device]:
        return [replace(device) for device in self._devices.values() if device.state == state]
    
    async def delete_by_id(self, device_id: str) -> None:
        self._devices.pop(device_id, None)
    
    async def exists_by_id(self, device_id: str) -> bool:
        return device_id in self._devices
