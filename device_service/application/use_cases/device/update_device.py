# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import DeviceNotFoundError, InvalidDeviceOperationError
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from .validation import require_text, validate_device_fields

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """
    Use case for updating existing devices.
    
    Supports a full update (every mutable field replaced) and a partial
    update (only supplied fields touched). Both paths share the same guards:
    name/brand are frozen while the device is IN_USE, and state changes must
    follow the DeviceState transition table. The creation time is never
    modified. Guards run before anything is saved.
    """
    
    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository
    
    async def full_update(
        self,
        device_id: str,
        name: Optional[str],
        brand: Optional[str],
        state: Optional[DeviceState],
    ) -> Device:
        """
        Replace name, brand and state of a device
        
        The name/brand guard applies even when the supplied values equal
        the current ones.
        
        Args:
            device_id: ID of the device to update
            name: New name, must not be blank
            brand: New brand, must not be blank
            state: New state, must be reachable from the current state
            
        Returns:
            The updated device as returned by the repository
            
        Raises:
            InvalidDeviceInputError: If name, brand or state is missing
            DeviceNotFoundError: If no device has this ID
            InvalidDeviceOperationError: If the device is IN_USE or the
                state transition is not allowed
        """
        validate_device_fields(name, brand, state)
        
        device = await self._load(device_id)
        
        self._check_name_and_brand_update(device)
        self._check_state_transition(device, state)
        
        device.name = name
        device.brand = brand
        device.state = state
        
        saved_device = await self.device_repository.save(device)
        logger.info(f"Fully updated device {saved_device.id}")
        return saved_device
    
    async def partial_update(
        self,
        device_id: str,
        name: Optional[str] = None,
        brand: Optional[str] = None,
        state: Optional[DeviceState] = None,
    ) -> Device:
        """
        Update only the supplied fields of a device
        
        None means "leave as is". A state-only change skips the name/brand
        guard, so an IN_USE device can still be released or deactivated.
        
        Raises:
            InvalidDeviceInputError: If a supplied name or brand is blank
            DeviceNotFoundError: If no device has this ID
            InvalidDeviceOperationError: If name/brand is supplied for an
                IN_USE device or the state transition is not allowed
        """
        if name is not None:
            require_text(name, "name", "Device name")
        if brand is not None:
            require_text(brand, "brand", "Device brand")
        
        device = await self._load(device_id)
        
        if name is not None or brand is not None:
            self._check_name_and_brand_update(device)
        
        if name is not None:
            device.name = name
        if brand is not None:
            device.brand = brand
        
        if state is not None:
            self._check_state_transition(device, state)
            device.state = state
        
        saved_device = await self.device_repository.save(device)
        logger.info(f"Partially updated device {saved_device.id}")
        return saved_device
    
    async def _load(self, device_id: str) -> Device:
        device = await self.device_repository.find_by_id(device_id)
        if not device:
            raise DeviceNotFoundError(device_id)
        return device
    
    def _check_name_and_brand_update(self, device: Device) -> None:
        if not device.can_update_name_or_brand():
            logger.warning(f"Rejected name/brand update of in-use device {device.id}")
            raise InvalidDeviceOperationError(
                f"Cannot update name or brand of device in IN_USE state: {device.id}"
            )
    
    def _check_state_transition(self, device: Device, new_state: DeviceState) -> None:
        if not device.validate_state_transition(new_state):
            logger.warning(
                f"Rejected state transition {device.state.value} -> {new_state.value} "
                f"for device {device.id}"
            )
            raise InvalidDeviceOperationError(
                f"Invalid state transition from {device.state.value} to {new_state.value} "
                f"for device: {device.id}"
            )
