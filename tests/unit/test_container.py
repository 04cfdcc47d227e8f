"""
Unit tests for the DI container wiring.
"""
import os
from unittest.mock import patch

import pytest
from device_service.application.use_cases.device import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDeviceUseCase,
    ListDevicesUseCase,
    UpdateDeviceUseCase,
)
from device_service.core.config import reset_settings
from device_service.di.base_container import BaseContainer
from device_service.di.container import DIContainer, get_container
from device_service.domain.repositories.device_repository import DeviceRepository
from device_service.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository


class TestBaseContainer:

    def test_singleton_by_type_and_string(self):
        container = BaseContainer()
        marker = object()
        container.register_singleton("marker", marker)
        container.register_singleton(BaseContainer, container)
        assert container.get("marker") is marker
        assert container.get(BaseContainer) is container

    def test_factory_called_per_lookup(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_missing_registration_raises(self):
        with pytest.raises(ValueError, match="No registration found"):
            BaseContainer().get("nothing")


class TestDIContainer:

    def test_memory_backend_wiring(self, mock_env):
        container = DIContainer()
        repository = container.get(DeviceRepository)
        assert isinstance(repository, InMemoryDeviceRepository)

        for use_case_type in (
            CreateDeviceUseCase,
            GetDeviceUseCase,
            ListDevicesUseCase,
            UpdateDeviceUseCase,
            DeleteDeviceUseCase,
        ):
            use_case = container.get(use_case_type)
            assert isinstance(use_case, use_case_type)
            assert use_case.device_repository is repository

    def test_get_container_is_singleton(self, mock_env):
        assert get_container() is get_container()

    def test_unknown_backend_rejected(self, mock_env):
        with patch.dict(os.environ, {"DEVICE_STORAGE_BACKEND": "redis"}):
            reset_settings()
            with pytest.raises(ValueError, match="Unknown device storage backend"):
                DIContainer()
