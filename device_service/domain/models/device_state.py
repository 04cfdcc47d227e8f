# Standard library imports
from enum import Enum
from typing import Dict, FrozenSet


class DeviceState(str, Enum):
    """Closed set of states a device can be in"""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"
    
    def can_transition_to(self, target: "DeviceState") -> bool:
        """
        Check whether moving from this state to ``target`` is allowed.
        
        Staying in the same state is always allowed. INACTIVE devices must
        go back to AVAILABLE before they can be put IN_USE.
        """
        if target == self:
            return True
        return target in ALLOWED_TRANSITIONS[self]


# Legal targets for each state, excluding the state itself
ALLOWED_TRANSITIONS: Dict[DeviceState, FrozenSet[DeviceState]] = {
    DeviceState.AVAILABLE: frozenset({DeviceState.IN_USE, DeviceState.INACTIVE}),
    DeviceState.IN_USE: frozenset({DeviceState.AVAILABLE, DeviceState.INACTIVE}),
    DeviceState.INACTIVE: frozenset({DeviceState.AVAILABLE}),
}
