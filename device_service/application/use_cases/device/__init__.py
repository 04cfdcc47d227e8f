from .create_device import CreateDeviceUseCase
from .list_devices import ListDevicesUseCase
from .get_device import GetDeviceUseCase
from .update_device import UpdateDeviceUseCase
from .delete_device import DeleteDeviceUseCase

__all__ = [
    "CreateDeviceUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
