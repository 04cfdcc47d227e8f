from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateDeviceUseCase,
            lambda: CreateDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
        
        container.register_factory(
            GetDeviceUseCase,
            lambda: GetDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
        
        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
        
        container.register_factory(
            UpdateDeviceUseCase,
            lambda: UpdateDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
        
        container.register_factory(
            DeleteDeviceUseCase,
            lambda: DeleteDeviceUseCase(
                device_repository=container.get(DeviceRepository),
            )
        )
