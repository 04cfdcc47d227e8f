from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.device import Device
from ...domain.models.device_state import DeviceState


class DeviceRequest(BaseModel):
    """DTO for device creation (POST) and full update (PUT) requests"""
    # Left optional so that missing/blank values reach the use case and
    # come back as a 400 with the offending field named.
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[DeviceState] = None


class DevicePatchRequest(BaseModel):
    """DTO for partial update (PATCH) requests. Omitted or null fields are left untouched."""
    name: Optional[str] = None
    brand: Optional[str] = None
    state: Optional[DeviceState] = None


class DeviceResponse(BaseModel):
    """DTO for device response"""
    model_config = ConfigDict(populate_by_name=True)
    
    id: str
    name: str
    brand: str
    state: DeviceState
    creation_time: datetime = Field(alias="creationTime")
    
    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            name=device.name,
            brand=device.brand,
            state=device.state,
            creation_time=device.creation_time,
        )
