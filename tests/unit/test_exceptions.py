"""
Unit tests for the device exception hierarchy.
"""
import pytest
from device_service.domain.exceptions import (
    DeviceError,
    DeviceInUseError,
    DeviceNotFoundError,
    InvalidDeviceInputError,
    InvalidDeviceOperationError,
)


class TestDeviceExceptions:

    def test_not_found_carries_id(self):
        error = DeviceNotFoundError("dev-1")
        assert error.device_id == "dev-1"
        assert error.message == "Device not found with id: dev-1"
        assert str(error) == error.message

    def test_in_use_carries_id(self):
        error = DeviceInUseError("dev-1")
        assert error.device_id == "dev-1"
        assert str(error) == "Device is currently in use and cannot be deleted: dev-1"

    def test_invalid_input_carries_field_and_is_value_error(self):
        error = InvalidDeviceInputError("Device name cannot be null or empty", field="name")
        assert error.field == "name"
        assert isinstance(error, ValueError)

    def test_invalid_input_field_optional(self):
        assert InvalidDeviceInputError("bad").field is None

    @pytest.mark.parametrize(
        "error",
        [
            DeviceNotFoundError("dev-1"),
            DeviceInUseError("dev-1"),
            InvalidDeviceInputError("bad"),
            InvalidDeviceOperationError("bad"),
        ],
    )
    def test_all_share_base_and_expose_only_message(self, error):
        assert isinstance(error, DeviceError)
        assert error.message == str(error)
        assert not hasattr(error, "details")
