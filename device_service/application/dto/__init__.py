from .device_dto import DeviceRequest, DevicePatchRequest, DeviceResponse

__all__ = [
    "DeviceRequest",
    "DevicePatchRequest",
    "DeviceResponse",
]
