"""
Exception hierarchy for the device domain.

Use cases raise these; the HTTP layer maps each kind to a status code
(not found -> 404, in use -> 409, invalid input/operation -> 400).
"""

# Standard library imports
from typing import Optional


class DeviceError(Exception):
    """Base exception for all device domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DeviceNotFoundError(DeviceError):
    """Raised when no device exists with the given ID."""

    def __init__(self, device_id: str):
        super().__init__(f"Device not found with id: {device_id}")
        self.device_id = device_id


class InvalidDeviceInputError(DeviceError, ValueError):
    """Raised when a caller-supplied value fails a precondition."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidDeviceOperationError(DeviceError):
    """Raised when a request violates a device guard (IN_USE edits, illegal transitions)."""
    pass


class DeviceInUseError(DeviceError):
    """Raised when deleting a device that is currently in use."""

    def __init__(self, device_id: str):
        super().__init__(f"Device is currently in use and cannot be deleted: {device_id}")
        self.device_id = device_id
