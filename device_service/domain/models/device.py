# Standard library imports
from dataclasses import dataclass
from datetime import datetime

# Local application imports
from .device_state import DeviceState
from ..exceptions import InvalidDeviceInputError


@dataclass(eq=False)
class Device:
    """
    Pure domain model for Device entity.
    
    A device has an immutable identity and creation time, a name and brand,
    and a state governed by the DeviceState transition table. Two devices
    are equal when they share the same ID.
    """
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise InvalidDeviceInputError("Device ID is required", field="id")
        if not self.name or len(self.name.strip()) < 1:
            raise InvalidDeviceInputError("Device name cannot be null or empty", field="name")
        if not self.brand or len(self.brand.strip()) < 1:
            raise InvalidDeviceInputError("Device brand cannot be null or empty", field="brand")
        if not isinstance(self.state, DeviceState):
            self.state = DeviceState(self.state)
    
    def can_delete(self) -> bool:
        """A device that is in use cannot be deleted"""
        return self.state != DeviceState.IN_USE
    
    def can_update_name_or_brand(self) -> bool:
        """Name and brand are frozen while the device is in use"""
        return self.state in (DeviceState.AVAILABLE, DeviceState.INACTIVE)
    
    def validate_state_transition(self, new_state: DeviceState) -> bool:
        """Check the move from the current state to ``new_state`` against the transition table"""
        return self.state.can_transition_to(new_state)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.id == other.id
    
    def __hash__(self) -> int:
        return hash(self.id)
