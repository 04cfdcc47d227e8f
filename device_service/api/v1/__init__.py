from .device_controller import router as device_router


__all__ = ["device_router"]
