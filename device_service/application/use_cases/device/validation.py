# Standard library imports
from typing import Optional

# Local application imports
from ....domain.exceptions import InvalidDeviceInputError
from ....domain.models.device_state import DeviceState


def require_text(value: Optional[str], field: str, label: str) -> str:
    """Reject None, empty and whitespace-only text"""
    if value is None or not value.strip():
        raise InvalidDeviceInputError(f"{label} cannot be null or empty", field=field)
    return value


def require_state(value: Optional[DeviceState], label: str = "Device state") -> DeviceState:
    if value is None:
        raise InvalidDeviceInputError(f"{label} cannot be null", field="state")
    return value


def validate_device_fields(
    name: Optional[str],
    brand: Optional[str],
    state: Optional[DeviceState],
) -> None:
    """Validate a complete set of device fields in order: name, brand, state"""
    require_text(name, "name", "Device name")
    require_text(brand, "brand", "Device brand")
    require_state(state)
