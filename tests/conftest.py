"""
Shared pytest fixtures for device-service tests.
"""
import os
from unittest.mock import AsyncMock, patch

import pytest

# Tests never talk to a real MongoDB
os.environ.setdefault("DEVICE_STORAGE_BACKEND", "memory")

from device_service.core.config import reset_settings
from device_service.di.container import reset_container
from device_service.domain.repositories.device_repository import DeviceRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables and rebuild settings/container."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_db",
        "DEVICE_STORAGE_BACKEND": "memory",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        reset_container()
        yield env_vars
    reset_settings()
    reset_container()


@pytest.fixture
def mock_device_repo():
    """Mock DeviceRepository with async methods."""
    return AsyncMock(spec=DeviceRepository)
