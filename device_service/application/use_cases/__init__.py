from .device import (
    CreateDeviceUseCase,
    ListDevicesUseCase,
    GetDeviceUseCase,
    UpdateDeviceUseCase,
    DeleteDeviceUseCase,
)

__all__ = [
    "CreateDeviceUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
