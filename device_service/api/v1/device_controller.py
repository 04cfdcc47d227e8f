# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.device_dto import DeviceRequest, DevicePatchRequest, DeviceResponse
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...di.container import get_container
from ...domain.exceptions import (
    DeviceError,
    DeviceInUseError,
    DeviceNotFoundError,
)
from ...domain.models.device_state import DeviceState


router = APIRouter(tags=["devices"])


def _to_http_exception(exception: DeviceError) -> HTTPException:
    """Map a domain error to its HTTP status: 404 not found, 409 in use, 400 otherwise"""
    if isinstance(exception, DeviceNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, DeviceInUseError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail=str(exception))


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(request: DeviceRequest) -> DeviceResponse:
    """
    Create a new device
    
    Args:
        request: Device name, brand and initial state
        
    Returns:
        DeviceResponse with the generated ID and creation time
    """
    container = get_container()
    create_device_use_case = container.get(CreateDeviceUseCase)
    
    try:
        device = await create_device_use_case.execute(
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return DeviceResponse.from_domain(device)


@router.get("", response_model=List[DeviceResponse])
async def list_devices() -> List[DeviceResponse]:
    """List all devices"""
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)
    
    devices = await list_devices_use_case.execute()
    return [DeviceResponse.from_domain(device) for device in devices]


@router.get("/brand/{brand}", response_model=List[DeviceResponse])
async def list_devices_by_brand(brand: str) -> List[DeviceResponse]:
    """List devices of a brand (exact, case-sensitive match)"""
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)
    
    try:
        devices = await list_devices_use_case.by_brand(brand)
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return [DeviceResponse.from_domain(device) for device in devices]


@router.get("/state/{state}", response_model=List[DeviceResponse])
async def list_devices_by_state(state: DeviceState) -> List[DeviceResponse]:
    """List devices in a state"""
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)
    
    try:
        devices = await list_devices_use_case.by_state(state)
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return [DeviceResponse.from_domain(device) for device in devices]


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """
    Get a device by ID
    
    Args:
        device_id: ID of the device
        
    Returns:
        DeviceResponse with device information
    """
    container = get_container()
    get_device_use_case = container.get(GetDeviceUseCase)
    
    try:
        device = await get_device_use_case.execute(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return DeviceResponse.from_domain(device)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceRequest) -> DeviceResponse:
    """
    Replace name, brand and state of a device
    
    Args:
        device_id: ID of the device
        request: Complete set of new values
        
    Returns:
        DeviceResponse with the updated device
    """
    container = get_container()
    update_device_use_case = container.get(UpdateDeviceUseCase)
    
    try:
        device = await update_device_use_case.full_update(
            device_id=device_id,
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return DeviceResponse.from_domain(device)


@router.patch("/{device_id}", response_model=DeviceResponse)
async def patch_device(device_id: str, request: DevicePatchRequest) -> DeviceResponse:
    """
    Update only the supplied fields of a device
    
    Args:
        device_id: ID of the device
        request: Any subset of name, brand and state
        
    Returns:
        DeviceResponse with the updated device
    """
    container = get_container()
    update_device_use_case = container.get(UpdateDeviceUseCase)
    
    try:
        device = await update_device_use_case.partial_update(
            device_id=device_id,
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return DeviceResponse.from_domain(device)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(device_id: str) -> Response:
    """Delete a device that is not in use"""
    container = get_container()
    delete_device_use_case = container.get(DeleteDeviceUseCase)
    
    try:
        await delete_device_use_case.execute(device_id)
    except DeviceError as exception:
        raise _to_http_exception(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
