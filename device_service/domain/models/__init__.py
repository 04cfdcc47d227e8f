from .device import Device
from .device_state import DeviceState, ALLOWED_TRANSITIONS

__all__ = ["Device", "DeviceState", "ALLOWED_TRANSITIONS"]
