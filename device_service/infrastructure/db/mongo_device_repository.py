# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device
from ...domain.models.device_state import DeviceState
from ...domain.constants import DeviceFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_device_collection


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository. The device ID is stored as the document _id."""
    
    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()
    
    async def save(self, device: Device) -> Device:
        """
        Save device (create new or update existing).
        
        Mutable fields go through $set; the creation time only through
        $setOnInsert so an update can never overwrite it.
        """
        if not device:
            raise ValueError("Device cannot be None")
        
        try:
            await self.device_collection.update_one(
                {DeviceFields.MONGO_ID: device.id},
                {
                    "$set": self._mutable_fields(device),
                    "$setOnInsert": {DeviceFields.CREATION_TIME: device.creation_time},
                },
                upsert=True,
            )
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: device.id})
        except Exception as e:
            raise RuntimeError(f"Error saving device: {str(e)}") from e
        
        if document is None:
            raise RuntimeError("Device was saved but could not be retrieved")
        return self._document_to_device(document)
    
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        if not device_id:
            return None
        
        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: device_id})
        except Exception as e:
            raise RuntimeError(f"Error finding device by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_device(document)
    
    async def find_all(self) -> List[Device]:
        """Find all devices"""
        return await self._find_many({}, "Error listing devices")
    
    async def find_by_brand(self, brand: str) -> List[Device]:
        """Find devices by exact brand"""
        return await self._find_many({DeviceFields.BRAND: brand}, "Error listing devices by brand")
    
    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find devices by state"""
        return await self._find_many({DeviceFields.STATE: state.value}, "Error listing devices by state")
    
    async def delete_by_id(self, device_id: str) -> None:
        """Delete device by ID"""
        try:
            await self.device_collection.delete_one({DeviceFields.MONGO_ID: device_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting device: {str(e)}") from e
    
    async def exists_by_id(self, device_id: str) -> bool:
        """Check whether a device exists"""
        if not device_id:
            return False
        
        try:
            count = await self.device_collection.count_documents(
                {DeviceFields.MONGO_ID: device_id}, limit=1
            )
        except Exception as e:
            raise RuntimeError(f"Error checking device existence: {str(e)}") from e
        return count > 0
    
    async def _find_many(self, query: Dict[str, Any], error_message: str) -> List[Device]:
        try:
            cursor = self.device_collection.find(query)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except Exception as e:
            raise RuntimeError(f"{error_message}: {str(e)}") from e
    
    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        # A stored document that no longer forms a valid Device is a storage
        # failure, not a caller error
        try:
            return Device(
                id=str(document[DeviceFields.MONGO_ID]),
                name=document.get(DeviceFields.NAME, ""),
                brand=document.get(DeviceFields.BRAND, ""),
                state=DeviceState(document.get(DeviceFields.STATE)),
                creation_time=ensure_utc(document.get(DeviceFields.CREATION_TIME)),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise RuntimeError(
                f"Invalid device document {document.get(DeviceFields.MONGO_ID)}: {str(e)}"
            ) from e
    
    def _mutable_fields(self, device: Device) -> Dict[str, Any]:
        """Convert the updatable part of a Device into MongoDB fields"""
        return {
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
        }
