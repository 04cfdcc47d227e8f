# Standard library imports
import logging
import uuid
from typing import Optional

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device
from ....domain.models.device_state import DeviceState
from ....utils.datetime_utils import utc_now
from .validation import validate_device_fields

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""
    
    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository
    
    def _generate_device_id(self) -> str:
        return str(uuid.uuid4())
    
    async def execute(
        self,
        name: Optional[str],
        brand: Optional[str],
        state: Optional[DeviceState],
    ) -> Device:
        """
        Create a new device
        
        The device gets a fresh UUID and the current UTC time as its
        creation time. Any state is accepted as the initial state.
        
        Args:
            name: Device name, must not be blank
            brand: Device brand, must not be blank
            state: Initial device state, must not be None
            
        Returns:
            The device as returned by the repository
            
        Raises:
            InvalidDeviceInputError: If name, brand or state is missing
        """
        validate_device_fields(name, brand, state)
        
        new_device = Device(
            id=self._generate_device_id(),
            name=name,
            brand=brand,
            state=state,
            creation_time=utc_now(),
        )
        
        saved_device = await self.device_repository.save(new_device)
        
        logger.info(
            f"Created device {saved_device.id} ({saved_device.brand} {saved_device.name}) "
            f"in state {saved_device.state.value}"
        )
        return saved_device
